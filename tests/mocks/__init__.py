"""
Test doubles for the Jupiter Toys test suite.

This package provides an in-memory stand-in for the rendered page so the
cart verification core can be tested without a browser:
- FakeElement / FakeSurface model a small element tree
- Builders produce cart and catalog pages in the site's markup shape
"""

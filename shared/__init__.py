"""Helpers shared by the live test suites."""

"""
Resilient element lookup over ordered candidate selectors.

Pages drift: a field may carry a dedicated class on one build and only
a table position on another. ``ResilientLocator`` tries each candidate
in order and returns the value behind the first one that matches
anything in the scope. Later candidates are never consulted.

A lookup that finds nothing is an ordinary outcome (``None`` from
``locate``, an empty/zero default from the convenience readers), never
an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from cartcheck.money import parse_currency, parse_quantity
from cartcheck.surface import Surface

logger = logging.getLogger(__name__)


class FieldMode(Enum):
    """What to read from the matched element."""

    TEXT = "text"
    INPUT_VALUE = "input_value"


@dataclass(frozen=True)
class LocatedValue:
    """Value read through the first matching candidate."""

    selector: str
    value: str


class ResilientLocator:
    """
    Resolve a field through a list of candidate selectors.

    Attributes:
        surface: Surface the lookups are made against.
    """

    def __init__(self, surface: Surface):
        self.surface = surface

    def _read(self, scope: Any, selector: str, mode: FieldMode) -> str | None:
        if mode is FieldMode.INPUT_VALUE:
            return self.surface.get_input_value(scope, selector)
        return self.surface.get_text(scope, selector)

    def locate(
        self,
        scope: Any,
        candidates: Sequence[str],
        mode: FieldMode = FieldMode.TEXT,
    ) -> LocatedValue | None:
        """
        Read a field through the first candidate present in the scope.

        Args:
            scope: Region to search (None for the whole page).
            candidates: Selectors in order of preference.
            mode: Read text content or an input's value.

        Returns:
            The selector that matched and the value read through it,
            or None if no candidate matched.
        """
        for selector in candidates:
            try:
                if self.surface.count_matches(scope, selector) <= 0:
                    continue
                value = self._read(scope, selector, mode)
            except Exception as exc:
                # A broken candidate counts as no match
                logger.debug("Candidate %r failed: %s", selector, exc)
                continue
            return LocatedValue(selector=selector, value=value or "")
        return None

    def text(self, scope: Any, candidates: Sequence[str]) -> str:
        """Stripped text content of the first match, or ``""``."""
        located = self.locate(scope, candidates, FieldMode.TEXT)
        return located.value.strip() if located else ""

    def input_value(self, scope: Any, candidates: Sequence[str]) -> str:
        """Value of the first matching input, or ``""``."""
        located = self.locate(scope, candidates, FieldMode.INPUT_VALUE)
        return located.value if located else ""

    def currency(self, scope: Any, candidates: Sequence[str]) -> float:
        return parse_currency(self.text(scope, candidates))

    def quantity(self, scope: Any, candidates: Sequence[str]) -> int:
        return parse_quantity(self.input_value(scope, candidates))

"""Collection matching outcome entities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from simple_assertions.failure_reporting import ComparisonMismatch, MismatchKind

from .record_rendering import render_record

LIST_TWO_MISSING_ITEMS = "List two is missing items"
LISTS_NOT_SIMILAR = "Lists are not similar."


@dataclass(frozen=True)
class CollectionMatchResult:
    """Outcome of matching two collections as multisets."""

    matched_pairs: tuple[tuple[object, object], ...]
    remaining_in_list_one: tuple[object, ...]
    remaining_in_list_two: tuple[object, ...]
    list_two_exhausted: bool = False

    @property
    def is_ok(self) -> bool:
        """Return True when every item of both collections was paired."""
        return not self.remaining_in_list_one and not self.remaining_in_list_two

    def mismatch(self, *, max_rendered_length: int = 0) -> ComparisonMismatch | None:
        """Describe leftover items, or return None for a successful match."""
        if self.is_ok:
            return None
        if self.list_two_exhausted:
            return ComparisonMismatch(
                kind=MismatchKind.MISSING_ITEMS,
                description=LIST_TWO_MISSING_ITEMS,
                expected=_listing(
                    "Remaining list one", self.remaining_in_list_one, max_rendered_length
                ),
                actual="[]",
            )
        return ComparisonMismatch(
            kind=MismatchKind.RESIDUAL,
            description=LISTS_NOT_SIMILAR,
            expected=_listing(
                "Remaining list one", self.remaining_in_list_one, max_rendered_length
            ),
            actual=_listing("Remaining list two", self.remaining_in_list_two, max_rendered_length),
        )


def _listing(label: str, items: Sequence[object], max_rendered_length: int) -> str:
    if not items:
        return "[]"
    return "\n".join(
        f"{label}: {render_record(item, max_length=max_rendered_length)}" for item in items
    )

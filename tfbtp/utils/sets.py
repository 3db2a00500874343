"""Set difference over plain lists with a caller-supplied equality.

Terraform only plans create/update/delete for a whole resource. Nested
blocks such as the roles of a role collection change through dedicated CLI
actions, so the update handler works out which elements to add and which
to remove itself.

Elements need not be hashable or orderable; equality is whatever the
caller says it is, e.g. "same name, ignore the rest".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Sequence, TypeVar

E = TypeVar("E")

EqualityPredicate = Callable[[E, E], bool]


def set_contains(items: Sequence[E], element: E, is_equal: EqualityPredicate[E]) -> bool:
    for item in items:
        if is_equal(item, element):
            return True
    return False


def set_difference(
    set_a: Sequence[E], set_b: Sequence[E], is_equal: EqualityPredicate[E],
) -> list[E]:
    """Return the elements of ``set_a`` without a match in ``set_b``.

    Keeps the order of ``set_a``. Quadratic; the inputs are nested
    configuration blocks with a handful of entries.
    """
    return [e for e in set_a if not set_contains(set_b, e, is_equal)]


@dataclass(frozen=True)
class Delta(Generic[E]):
    to_add: list[E] = field(default_factory=list)
    to_remove: list[E] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove


def compute_delta(
    desired: Sequence[E], current: Sequence[E], is_equal: EqualityPredicate[E],
) -> Delta[E]:
    """Work out what turns ``current`` into ``desired``."""
    return Delta(
        to_add=set_difference(desired, current, is_equal),
        to_remove=set_difference(current, desired, is_equal),
    )


def apply_delta(
    current: Sequence[E], delta: Delta[E], is_equal: EqualityPredicate[E],
) -> list[E]:
    """Drop ``delta.to_remove`` from ``current`` and append ``delta.to_add``."""
    kept = set_difference(current, delta.to_remove, is_equal)
    return kept + list(delta.to_add)

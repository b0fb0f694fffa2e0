"""Type-name orderings used when merging client proxy lists.

A :data:`TypeOrder` is a plain comparison function over canonical type
names: negative when the first name sorts first, zero when both denote
the same type, positive otherwise. Proxy lists are kept most-derived
first, so a subtype always sorts before any of its supertypes.

A pairwise subtype comparator with a name fallback is not transitive,
so :func:`ordered_union` never sorts with one directly. Orders built by
:func:`subtype_first` expose their predicate and are laid out
topologically instead.
"""

from __future__ import annotations

import heapq
from collections.abc import Callable, Iterable
from functools import cmp_to_key

type TypeOrder = Callable[[str, str], int]
type SubtypePredicate = Callable[[str, str], bool]


def lexical_order(first: str, second: str) -> int:
    """Order names alphabetically."""
    return (first > second) - (first < second)


class SubtypeOrder:
    """Comparator that places subtypes before their supertypes.

    *is_subtype(sub, sup)* reports whether *sub* derives from *sup*.
    Two names that are subtypes of each other denote the same type.
    Unrelated names compare alphabetically.
    """

    __slots__ = ("is_subtype",)

    def __init__(self, is_subtype: SubtypePredicate) -> None:
        self.is_subtype = is_subtype

    def __call__(self, first: str, second: str) -> int:
        if first == second:
            return 0
        below = self.is_subtype(first, second)
        above = self.is_subtype(second, first)
        if below and above:
            return 0
        if below:
            return -1
        if above:
            return 1
        return lexical_order(first, second)

    def layout(self, names: list[str]) -> list[str]:
        """Most-derived-first arrangement of distinct *names*.

        A name is placed once every subtype of it in *names* is placed;
        among the names ready at the same time the alphabetically first
        goes next.
        """
        pending = {
            name: {other for other in names if other != name and self.is_subtype(other, name)}
            for name in names
        }
        ready = [name for name, subs in pending.items() if not subs]
        heapq.heapify(ready)
        placed: list[str] = []
        while ready:
            name = heapq.heappop(ready)
            placed.append(name)
            del pending[name]
            for other, subs in pending.items():
                if name in subs:
                    subs.discard(name)
                    if not subs:
                        heapq.heappush(ready, other)
        # Only a cyclic predicate leaves names behind.
        placed.extend(sorted(pending))
        return placed


def subtype_first(is_subtype: SubtypePredicate) -> SubtypeOrder:
    """Build an order that places subtypes before their supertypes."""
    return SubtypeOrder(is_subtype)


def ordered_union(
    first: Iterable[str] | None,
    second: Iterable[str] | None,
    order: TypeOrder,
) -> tuple[str, ...]:
    """Union two name lists into one sorted, duplicate-free tuple.

    Names that compare equal under *order* collapse to the first one
    seen, *first* before *second*. The result does not depend on which
    side a name came from.
    """
    distinct: list[str] = []
    for names in (first, second):
        for name in names or ():
            if not any(order(kept, name) == 0 for kept in distinct):
                distinct.append(name)

    if isinstance(order, SubtypeOrder):
        return tuple(order.layout(distinct))
    return tuple(sorted(distinct, key=cmp_to_key(order)))

from __future__ import annotations

from bisect import bisect_left
from functools import total_ordering
from typing import Iterable, Iterator, Optional


class SealedVersionError(TypeError):
    pass


@total_ordering
class SetVersion(object):
    """
    A SetVer version, i.e., a hereditarily finite set of other versions.

    The children are always kept sorted by the canonical order, so that iterating
    over a version, comparing two versions and printing a version all see the same
    unique arrangement of the set.
    NOTE: a version becomes sealed once it is adopted as a child of another version
    (or hashed), after which `add_child` is no longer allowed.
    The sealed version is shared by reference among all its parents.
    """
    def __init__(self, children: Iterable[SetVersion] = ()) -> None:
        super().__init__()
        # the duplicates are dropped here, the parser relies on it to detect non-unique elements
        self._children: list[SetVersion] = sorted(set(children))
        for child in self._children:
            child._sealed = True
        self._sealed: bool = False
        self._hash: Optional[int] = None

    @property
    def children(self) -> tuple[SetVersion, ...]:
        return tuple(self._children)

    def is_empty(self) -> bool:
        return len(self._children) == 0

    def add_child(self, child: SetVersion) -> bool:
        """
        Add a child version to this version

        :param child: the child version, which is sealed afterwards
        :return: False if an equal child already exists, True otherwise
        """
        if self._sealed:
            raise SealedVersionError(
                f"Cannot add a child to {self}, it is already used by another version."
            )
        if child is self:
            raise ValueError("A version cannot contain itself.")
        child._sealed = True
        # fast path for building a chain of increasing versions
        if len(self._children) == 0 or self._children[-1] < child:
            self._children.append(child)
            return True
        idx = bisect_left(self._children, child)
        if self._children[idx] == child:
            return False
        self._children.insert(idx, child)
        return True

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[SetVersion]:
        return iter(self._children)

    def __contains__(self, item) -> bool:
        if not isinstance(item, SetVersion):
            return False
        idx = bisect_left(self._children, item)
        return idx < len(self._children) and self._children[idx] == item

    def __eq__(self, o: object) -> bool:
        if isinstance(o, SetVersion):
            if self._hash is not None and o._hash is not None and self._hash != o._hash:
                return False
            return canonical_cmp(self, o) == 0
        return NotImplemented

    def __lt__(self, o: object) -> bool:
        if isinstance(o, SetVersion):
            return canonical_cmp(self, o) < 0
        return NotImplemented

    def __hash__(self) -> int:
        # children are hashed before their parents, without recursion
        pending = [self]
        while pending:
            version = pending[-1]
            if version._hash is not None:
                pending.pop()
                continue
            unhashed = [child for child in version._children if child._hash is None]
            if unhashed:
                pending.extend(unhashed)
                continue
            pending.pop()
            version._sealed = True
            version._hash = hash(tuple(child._hash for child in version._children))
        return self._hash

    def __str__(self) -> str:
        return format_version(self)

    def __repr__(self) -> str:
        return f"SetVersion('{self}')"


def canonical_cmp(a: SetVersion, b: SetVersion) -> int:
    """
    Three-way comparison in the canonical order

    The children are compared pairwise, the first unequal pair decides, and a version
    whose children are a prefix of the other's comes first.
    The empty version is thus before every other version.

    :return: -1, 0 or 1
    """
    # each entry is a pair of versions and the index of the next children pair to compare
    pending = [(a, b, 0)]
    while pending:
        x, y, idx = pending.pop()
        if x is y:
            continue
        if idx < len(x._children) and idx < len(y._children):
            pending.append((x, y, idx + 1))
            pending.append((x._children[idx], y._children[idx], 0))
        elif len(x._children) != len(y._children):
            return -1 if len(x._children) < len(y._children) else 1
    return 0


def format_version(version: SetVersion) -> str:
    """
    The canonical text of a version, where the smallest children come first
    """
    parts = []
    pending = [version]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
            continue
        parts.append("{")
        pending.append("}")
        pending.extend(reversed(item._children))
    return "".join(parts)

from __future__ import annotations

import math
from enum import Enum

from setver.objects.version import SetVersion


class Comparison(Enum):
    SUBSET = 1
    EQUAL = 2
    SUPERSET = 3
    INCOMPARABLE = 4

    def __str__(self) -> str:
        return self.name.lower()

    def __float__(self) -> float:
        return SETVER_ORDERING[self]


# SetVer reports the ordering of two versions as a number:
# 0 for an older version, 1 for the same version,
# infinity for a newer version and NaN for unrelated versions
SETVER_ORDERING = {
    Comparison.SUBSET: 0.0,
    Comparison.EQUAL: 1.0,
    Comparison.SUPERSET: math.inf,
    Comparison.INCOMPARABLE: math.nan,
}


def is_subset(a: SetVersion, b: SetVersion) -> bool:
    return all(child in b for child in a)


def is_superset(a: SetVersion, b: SetVersion) -> bool:
    return is_subset(b, a)


def is_strict_subset(a: SetVersion, b: SetVersion) -> bool:
    return is_subset(a, b) and not is_subset(b, a)


def is_strict_superset(a: SetVersion, b: SetVersion) -> bool:
    return is_strict_subset(b, a)


def compare(a: SetVersion, b: SetVersion) -> Comparison:
    """
    Compare two versions by set inclusion

    Equality is checked before inclusion, since the subset relation is reflexive
    and would otherwise report equal versions as subsets.
    """
    if a == b:
        return Comparison.EQUAL
    if is_subset(a, b):
        return Comparison.SUBSET
    if is_superset(a, b):
        return Comparison.SUPERSET
    return Comparison.INCOMPARABLE


def setver_ordering(a: SetVersion, b: SetVersion) -> float:
    return float(compare(a, b))

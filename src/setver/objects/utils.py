from __future__ import annotations

from typing import Generator

from logzero import logger

from setver.objects.version import SetVersion


def natural_numbers(n: int) -> Generator[SetVersion, None, None]:
    """
    Yield the von Neumann ordinals 0, 1, ..., n

    The ordinal k is the set of all the ordinals before it, so every ordinal is
    shared by all the ordinals after it instead of being rebuilt.
    """
    if n < 0:
        raise ValueError(f"Natural numbers are non-negative, but got {n}.")
    previous: list[SetVersion] = []
    for k in range(n + 1):
        k_version = SetVersion()
        for child in previous:
            k_version.add_child(child)
        previous.append(k_version)
        yield k_version


def natural_number(n: int) -> SetVersion:
    version = None
    for version in natural_numbers(n):
        pass
    logger.debug(f"Built natural number {n} with {len(version)} children")
    return version

"""Canonical enumeration of the attribute cross-product.

Order is odometer order: the first attribute is the outermost digit, the last
attribute the innermost, and each attribute's levels advance in declared
order. Index i of iter_configurations equals configuration_at(domain, i).
"""

from __future__ import annotations

from itertools import product
from typing import Iterator

from fetpdecide.uptake.model_config import AttributeDomain


def count_configurations(domain: AttributeDomain) -> int:
    return domain.size()


def iter_configurations(domain: AttributeDomain) -> Iterator[dict[str, str]]:
    if domain.size() == 0:
        return
    names = domain.names()
    for levels in product(*(spec.levels for spec in domain)):
        yield dict(zip(names, levels))


def configuration_at(domain: AttributeDomain, index: int) -> dict[str, str]:
    total = domain.size()
    if index < 0 or index >= total:
        raise IndexError(f"configuration index {index} out of range [0, {total})")
    digits: list[str] = []
    remainder = index
    for spec in reversed(domain.attributes):
        remainder, digit = divmod(remainder, len(spec.levels))
        digits.append(spec.levels[digit])
    digits.reverse()
    return dict(zip(domain.names(), digits))

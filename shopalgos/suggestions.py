"""Suggest pairs of products whose prices add up to an amount."""

from __future__ import annotations

from collections.abc import Iterable


def product_suggestions(product_prices: Iterable[int], amount: int) -> list[tuple[int, int]]:
    """Return (price, partner) pairs summing to ``amount``.

    Each pair is reported when its second member is reached; the partner is
    an earlier price that has not already been used to complete a pair.
    """
    seen: set[int] = set()
    offers = []
    for price in product_prices:
        partner = amount - price
        if partner in seen:
            offers.append((price, partner))
        else:
            seen.add(price)
    return offers
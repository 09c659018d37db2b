"""Portfolio aggregation over an application's products and funds.

Amounts are ``Decimal`` end to end.  No rounding is applied here; the
template layer rounds for display only.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from itertools import chain

from appdoc.models import Fund, Product


def flatten_funds(products: Iterable[Product]) -> tuple[Fund, ...]:
    """Return every fund across *products*, in product order."""
    return tuple(chain.from_iterable(p.funds for p in products))


def portfolio_total(products: Iterable[Product], tax_rate: Decimal) -> Decimal:
    """Sum ``amount - fees`` over all funds, then scale by *tax_rate*.

    Product grouping does not affect the result.  An empty portfolio
    totals ``Decimal("0")``.
    """
    net = sum((f.amount - f.fees for f in flatten_funds(products)), Decimal("0"))
    return net * tax_rate

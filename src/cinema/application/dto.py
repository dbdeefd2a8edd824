"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QuoteLineDTO:
    """Output: a single ticket line as displayed to the user."""

    ticket_type: str
    quantity: int
    unit_price: int
    line_total: int


@dataclass(frozen=True)
class PurchaseQuoteDTO:
    """Output: what an order would cost, without paying for it."""

    account_id: int
    lines: list[QuoteLineDTO]
    total_price: int
    total_seats: int
    ticket_count: int


from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Literal

Direction = Literal["all", "credit", "debit"]

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Transaction:
    id: str
    amount: int  # in minor units (paise)
    merchant: str
    category: str
    method: str
    date: datetime
    is_credit: bool

    @property
    def signed_amount(self) -> int:
        return self.amount if self.is_credit else -self.amount


@dataclass(frozen=True)
class CandidateTransaction:
    """Parsed from a bank notification, not yet admitted to the ledger."""

    amount: int  # in minor units (paise)
    is_credit: bool
    merchant_hint: str
    method_hint: str = "Bank"


def major_to_minor(value: Decimal | int | float | str) -> int:
    """
    Convert a major-unit amount (rupees) to integer minor units.

    Floats go through str() so 1250.5 becomes exactly 125050.
    Raises ValueError for anything that is not a finite number.
    """
    try:
        d = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValueError(f"Not a number: {value!r}") from e
    if not d.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    try:
        return int((d.quantize(CENT, rounding=ROUND_HALF_UP) * 100).to_integral_value())
    except InvalidOperation as e:
        # more significant digits than the decimal context holds
        raise ValueError(f"Amount out of range: {value!r}") from e


def minor_to_major(value: int) -> float:
    return round(value / 100.0, 2)


def format_amount(value: int) -> str:
    return str((Decimal(value) / 100).quantize(CENT))


def title_case(text: str) -> str:
    # "UBER eats" -> "Uber Eats"; whitespace runs are preserved
    return " ".join(w[:1].upper() + w[1:].lower() for w in text.split(" "))

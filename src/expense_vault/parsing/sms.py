from __future__ import annotations

import re

from ..categories import ALERT_METHOD
from ..models import CandidateTransaction, major_to_minor

# Marker, optional whitespace, then either comma-grouped digits
# (1,250 or Indian 1,25,000) or a plain digit run, with an optional
# two-digit fraction. The trailing lookahead rejects amounts that
# continue with more digits, e.g. "Rs 1.2.3" or "Rs 12.345".
AMOUNT_RE = re.compile(
    r"(?<![A-Za-z])(?:Rs\.?|INR|₹)\s*"
    r"(?P<whole>\d{1,3}(?:,\d{2,3})+|\d+)"
    r"(?P<frac>\.\d{2})?"
    r"(?![\d]|,\d|\.\d)"
)

MERCHANT_RE = re.compile(r"\bat\s+(\S+)", re.IGNORECASE)

CREDIT_KEYWORDS = ("credited", "received")

FALLBACK_MERCHANT = "Bank Alert"


def is_credit_text(text: str) -> bool:
    t = text.lower()
    return any(k in t for k in CREDIT_KEYWORDS)


def merchant_hint(text: str) -> str:
    m = MERCHANT_RE.search(text)
    if not m:
        return FALLBACK_MERCHANT
    token = m.group(1).strip(".,;:!?()[]\"'")
    return token or FALLBACK_MERCHANT


def method_hint(text: str) -> str:
    return "UPI" if re.search(r"\bupi\b", text, re.IGNORECASE) else ALERT_METHOD


def parse(text: str) -> CandidateTransaction | None:
    """
    Best-effort classifier for a bank notification.

    Returns None when no amount is found or the numeral cannot be
    converted; never raises for odd input.
    """
    if not text:
        return None

    m = AMOUNT_RE.search(text)
    if not m:
        return None

    raw = m.group("whole").replace(",", "") + (m.group("frac") or "")
    try:
        amount = major_to_minor(raw)
    except ValueError:
        return None
    if amount < 0:
        return None

    return CandidateTransaction(
        amount=amount,
        is_credit=is_credit_text(text),
        merchant_hint=merchant_hint(text),
        method_hint=method_hint(text),
    )

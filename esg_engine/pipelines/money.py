"""
Money parsing for free-form currency strings.

Locale assumptions:
    - '.' is the decimal separator and ',' a thousands separator
      ("US$1,200,000" -> 1200000).
    - Currency symbols and codes (US$, $, USD, ZWL) are ignored.
    - The first number in the string is the amount; trailing text such as
      a year in brackets is ignored.
    - A magnitude suffix directly after the number (k, m, mn, bn, b,
      thousand, million, billion) is recorded on the result.

Procurement spend in the source data is quoted in millions ("US$12.5m").
By default the literal is returned as written and totals are formatted in
millions, which matches that data. Pass apply_multiplier=True to scale the
literal by its suffix instead.
"""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

# The number must be whole: no digit, '.' or ',' on either side of it.
# Letters after it are a suffix only when they spell one exactly ("1.2mil" has none).
_AMOUNT = re.compile(
    r"(?<![\d.,])"
    r"(?P<number>[-+]?(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d+)?|[-+]?\.\d+)"
    r"(?![\d.,])"
    r"(?:\s*(?P<suffix>thousand|million|billion|mn|bn|k|m|b)(?![a-z]))?",
    re.IGNORECASE,
)

_SUFFIX_MULTIPLIERS = {
    "k": Decimal("1000"),
    "thousand": Decimal("1000"),
    "m": Decimal("1000000"),
    "mn": Decimal("1000000"),
    "million": Decimal("1000000"),
    "b": Decimal("1000000000"),
    "bn": Decimal("1000000000"),
    "billion": Decimal("1000000000"),
}

_MILLION = Decimal("1000000")


@dataclass(frozen=True)
class MoneyAmount:
    magnitude: Decimal        # number as written, separators removed
    suffix: Optional[str]     # lower-cased magnitude suffix, if any

    @property
    def multiplier(self) -> Decimal:
        return _SUFFIX_MULTIPLIERS.get(self.suffix or "", Decimal("1"))

    def scaled(self) -> Decimal:
        return self.magnitude * self.multiplier


def parse_money_amount(text: Optional[str]) -> Optional[MoneyAmount]:
    """Parse the first amount in `text`; None when there is no number."""
    if not text:
        return None
    match = _AMOUNT.search(text)
    if not match:
        return None
    try:
        magnitude = Decimal(match.group("number").replace(",", ""))
    except InvalidOperation:
        return None
    suffix = match.group("suffix")
    return MoneyAmount(magnitude=magnitude, suffix=suffix.lower() if suffix else None)


def parse_money(text: Optional[str], apply_multiplier: bool = False) -> Optional[Decimal]:
    amount = parse_money_amount(text)
    if amount is None:
        return None
    return amount.scaled() if apply_multiplier else amount.magnitude


def format_millions(amount: Decimal, apply_multiplier: bool = False) -> str:
    """Format a total as 'US$<x.x>m'. Scaled totals are converted to millions first."""
    if apply_multiplier:
        amount = amount / _MILLION
    rounded = amount.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"US${rounded}m"

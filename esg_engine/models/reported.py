"""
Reported / NotReported - decoding of free-text metric values
esg_engine/models/reported.py

Source data carries facts as loosely spelled strings ("In place", "Yes",
"Not reported"). They are decoded once into a closed set of variants so the
extractors match on `Reported.matches(...)` instead of raw string equality.

    decode("In Place.")      -> Reported(value="In Place.")
    decode("Not reported")   -> NotReported(raw="Not reported")
    decode("")               -> NotReported(raw="")
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

# Canonical forms that mean "nothing was reported"
NOT_REPORTED_MARKERS = frozenset({
    "",
    "not reported",
    "n a",
    "not applicable",
    "not disclosed",
})

_NON_ALNUM = re.compile(r"[^0-9a-z]+")
_CLAUSE_BREAK = re.compile(r"[;:,.!?()\[\]]")
# A negation as the last or second-to-last word before the keyword
_NEGATED_TAIL = re.compile(r"(?:^|\s)(?:no|not|non|without|lack of)(?:\s+\w+)?$")


def canonical(text: Optional[str]) -> str:
    """Lower-case, punctuation-free, single-spaced form of `text`."""
    if not text:
        return ""
    return " ".join(_NON_ALNUM.sub(" ", text.lower()).split())


@dataclass(frozen=True)
class Reported:
    """A value the company actually reported."""
    value: str
    numeric: Optional[float] = None

    def matches(self, expected: str) -> bool:
        return canonical(self.value) == canonical(expected)

    def mentions(self, keyword: str) -> bool:
        """
        True when `keyword` appears in the value and is not negated.

        Only the one or two words before the keyword, within the same
        clause, are checked: "No alignment" and "not in alignment" are
        negated, "Non-financial disclosures in alignment" is not.
        """
        key = canonical(keyword)
        if not key:
            return False
        text = self.value.lower()
        match = re.search(_NON_ALNUM.pattern.join(re.escape(word) for word in key.split()), text)
        if match is None:
            return False
        clause = _CLAUSE_BREAK.split(text[:match.start()])[-1]
        return _NEGATED_TAIL.search(canonical(clause)) is None


@dataclass(frozen=True)
class NotReported:
    """Absent, blank, or explicitly "Not reported"."""
    raw: str = ""

    def matches(self, expected: str) -> bool:
        return False

    def mentions(self, keyword: str) -> bool:
        return False


ReportedValue = Union[Reported, NotReported]


def decode(raw: Optional[str], numeric: Optional[float] = None) -> ReportedValue:
    """Decode a raw metric string into Reported or NotReported."""
    if raw is None:
        return NotReported()
    if canonical(raw) in NOT_REPORTED_MARKERS:
        return NotReported(raw=raw)
    return Reported(value=raw, numeric=numeric)


def is_reported(raw: Optional[str]) -> bool:
    return isinstance(decode(raw), Reported)

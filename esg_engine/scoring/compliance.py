"""
scoring/compliance.py - Compliance Score

Weighted checklist over the compliance extractor's output:

    Check                                            Points
    ──────────────────────────────────────────────── ──────
    Ethics / Code of Conduct in place                 20
    Anti-corruption policy                            20
    Whistleblowing mechanism reported                 20
    Zero compliance incidents ("0" in the count)      20
    Supplier Code of Conduct in place                 10
    IFRS disclosures state alignment                  10

score = round(100 × earned / 100). Every weight is always in the
denominator; a missing metric simply earns nothing.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, Sequence

import structlog

from esg_engine.models.metric import Metric
from esg_engine.models.reported import decode, is_reported
from esg_engine.models.summary import ComplianceMetrics
from esg_engine.pipelines.extractors import get_compliance_metrics
from esg_engine.pipelines.ingest import RecordInput, get_latest_year, parse_records, pool_metrics
from esg_engine.scoring.utils import round_half_up

logger = structlog.get_logger(__name__)

COMPLIANCE_WEIGHTS: Dict[str, Decimal] = {
    "ethics_code":     Decimal("20"),
    "anti_corruption": Decimal("20"),
    "whistleblowing":  Decimal("20"),
    "zero_incidents":  Decimal("20"),
    "supplier_code":   Decimal("10"),
    "ifrs_alignment":  Decimal("10"),
}


@dataclass
class ComplianceResult:
    """Output of ComplianceCalculator.calculate()."""
    score: int                                         # [0, 100]
    earned: Decimal
    max_score: Decimal
    checks: Dict[str, bool] = field(default_factory=dict)


def indicates_alignment(status: str) -> bool:
    """True when an IFRS status reports alignment ("Partial alignment"), not its absence ("No alignment")."""
    return decode(status).mentions("alignment")


class ComplianceCalculator:
    """Calculate the compliance checklist score."""

    def evaluate(self, compliance: ComplianceMetrics) -> Dict[str, bool]:
        """Pass/fail per checklist item."""
        return {
            "ethics_code": compliance.ethics_code.status,
            "anti_corruption": compliance.anti_corruption.status,
            "whistleblowing": is_reported(compliance.whistleblowing.mechanism),
            "zero_incidents": "0" in compliance.incidents.count,
            "supplier_code": compliance.supplier_code.status,
            "ifrs_alignment": indicates_alignment(compliance.ifrs_compliance.status),
        }

    def calculate(self, metrics: Sequence[Metric], latest_year: int) -> ComplianceResult:
        checks = self.evaluate(get_compliance_metrics(metrics, latest_year))

        earned = sum(
            (COMPLIANCE_WEIGHTS[name] for name, passed in checks.items() if passed),
            Decimal("0"),
        )
        max_score = sum(COMPLIANCE_WEIGHTS.values(), Decimal("0"))
        score = round_half_up(earned / max_score * Decimal("100")) if max_score > 0 else 0

        logger.info(
            "compliance_calculated",
            checks=checks,
            earned=float(earned),
            max_score=float(max_score),
            score=score,
        )

        return ComplianceResult(score=score, earned=earned, max_score=max_score, checks=checks)


def calculate_compliance_score(records: Iterable[RecordInput]) -> int:
    """Compliance score (0-100) for a company's records."""
    metrics = pool_metrics(parse_records(records))
    return ComplianceCalculator().calculate(metrics, get_latest_year(metrics)).score

"""
scoring/csr_impact.py - CSR Impact Score

Formula:
    education_term = min(CAP, total_education_attendance / 1000 × 5)
    health_term    = min(CAP, hospital_attendees / 10000 × 5)
    trend_bonus    = 5 if male education attendance rose year over year
    CSR = min(100, education_term + health_term + trend_bonus)

CAP = 50. The trend bonus needs at least two dated values of the male
education metric, both numeric.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional, Sequence

import structlog

from esg_engine.config import Settings, get_settings
from esg_engine.models.enumerations import MetricName
from esg_engine.models.metric import Metric
from esg_engine.pipelines.extractors import get_csr_metrics
from esg_engine.pipelines.ingest import RecordInput, get_latest_year, parse_records, pool_metrics
from esg_engine.pipelines.utils import find_metric, latest_and_previous
from esg_engine.scoring.utils import clamp, to_decimal

logger = structlog.get_logger(__name__)


@dataclass
class CsrImpactResult:
    """Output of CsrImpactCalculator.calculate()."""
    score: Decimal            # [0, 100] quantized to 0.01
    education_term: Decimal
    health_term: Decimal
    trend_bonus: Decimal


class CsrImpactCalculator:
    """Calculate the CSR impact score from education and health outreach."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def _term(self, amount: float, divisor: float) -> Decimal:
        if amount <= 0:
            return Decimal("0")
        points = Decimal(str(self.settings.CSR_POINTS_PER_UNIT))
        raw = to_decimal(amount) / Decimal(str(divisor)) * points
        return min(Decimal(str(self.settings.CSR_TERM_CAP)), raw)

    def _education_rising(self, metrics: Sequence[Metric]) -> bool:
        metric = find_metric(metrics, MetricName.EDUCATION_MALES.value)
        if metric is None or len(metric.values) < 2:
            return False
        latest, previous = latest_and_previous(metric)
        if latest is None or previous is None:
            return False
        if latest.numeric_value is None or previous.numeric_value is None:
            return False
        return latest.numeric_value > previous.numeric_value

    def calculate(self, metrics: Sequence[Metric], latest_year: int) -> CsrImpactResult:
        csr = get_csr_metrics(metrics, latest_year)

        education_term = self._term(csr.education.total, self.settings.CSR_EDUCATION_DIVISOR)
        health_term = self._term(
            csr.health_wellbeing.hospital_attendees, self.settings.CSR_HEALTH_DIVISOR
        )
        trend_bonus = (
            Decimal(str(self.settings.CSR_TREND_BONUS))
            if self._education_rising(metrics)
            else Decimal("0")
        )

        score = clamp(education_term + health_term + trend_bonus).quantize(Decimal("0.01"))

        logger.info(
            "csr_impact_calculated",
            education_total=csr.education.total,
            hospital_attendees=csr.health_wellbeing.hospital_attendees,
            education_term=float(education_term),
            health_term=float(health_term),
            trend_bonus=float(trend_bonus),
            score=float(score),
        )

        return CsrImpactResult(
            score=score,
            education_term=education_term,
            health_term=health_term,
            trend_bonus=trend_bonus,
        )


def calculate_csr_impact_score(
    records: Iterable[RecordInput],
    settings: Optional[Settings] = None,
) -> float:
    """CSR impact score (0-100) for a company's records."""
    metrics = pool_metrics(parse_records(records))
    return float(CsrImpactCalculator(settings).calculate(metrics, get_latest_year(metrics)).score)

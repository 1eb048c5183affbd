"""
scoring/governance_calculator.py - Overall Governance Score

Combines five sub-scores into a composite with a letter grade.

Formula:
    composite = round(mean(board_independence, committee_effectiveness,
                           csr_impact, compliance, disclosure))

    disclosure = 50 × [remuneration disclosure == "Fully disclosed"]
               + 30 × [ESG-linked executive pay]
               + 20 × [latest IFRS disclosure states alignment]

Grades (config.py, inclusive lower bounds):
    ≥90 A   ≥80 B   ≥70 C   ≥60 D   else F

Committee effectiveness is not modelled yet. It enters the composite as a
fixed placeholder and is reported with modeled=False so a consumer can tell
it from a real score. A company with no metric values at all scores 0 / F
and the placeholder is left out of the composite.
"""

from decimal import Decimal
from typing import Iterable, Optional, Sequence

import structlog

from esg_engine.config import Settings, get_settings
from esg_engine.models.enumerations import Grade, MetricName
from esg_engine.models.metric import Metric
from esg_engine.models.reported import canonical
from esg_engine.models.summary import GovernanceScore, PlaceholderScore, ScoreBreakdown
from esg_engine.pipelines.extractors import get_remuneration_metrics
from esg_engine.pipelines.ingest import RecordInput, get_latest_year, parse_records, pool_metrics
from esg_engine.pipelines.utils import find_metric, most_recent_value
from esg_engine.scoring.board_independence import BoardIndependenceCalculator
from esg_engine.scoring.compliance import ComplianceCalculator, indicates_alignment
from esg_engine.scoring.csr_impact import CsrImpactCalculator
from esg_engine.scoring.utils import clamp, mean, round_half_up

logger = structlog.get_logger(__name__)

DISCLOSURE_FULLY_DISCLOSED = 50
DISCLOSURE_ESG_LINKED_PAY = 30
DISCLOSURE_IFRS_ALIGNMENT = 20

COMMITTEE_PLACEHOLDER_NOTE = (
    "Committee effectiveness is not modelled yet; a fixed placeholder value is used."
)


def grade_for_score(score: float, settings: Optional[Settings] = None) -> Grade:
    """Step function from composite score to letter grade."""
    settings = settings or get_settings()
    for minimum, letter in settings.grade_thresholds:
        if score >= minimum:
            return Grade(letter)
    return Grade.F


class GovernanceCalculator:
    """Calculate the overall governance composite, grade and breakdown."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    def disclosure_score(self, metrics: Sequence[Metric], latest_year: int) -> int:
        remuneration = get_remuneration_metrics(metrics, latest_year)
        score = 0
        if canonical(remuneration.disclosure.status) == canonical("Fully disclosed"):
            score += DISCLOSURE_FULLY_DISCLOSED
        if remuneration.esg_linked.status:
            score += DISCLOSURE_ESG_LINKED_PAY
        ifrs = most_recent_value(find_metric(metrics, MetricName.IFRS_DISCLOSURE.value))
        if ifrs is not None and indicates_alignment(ifrs.value):
            score += DISCLOSURE_IFRS_ALIGNMENT
        return score

    def calculate(self, metrics: Sequence[Metric]) -> GovernanceScore:
        """
        Args:
            metrics: Pooled metrics for one company.

        Returns:
            GovernanceScore with composite score, grade and all five sub-scores.
        """
        latest_year = get_latest_year(metrics)
        has_data = latest_year > 0

        board = BoardIndependenceCalculator(self.settings).calculate(metrics, latest_year)
        compliance = ComplianceCalculator().calculate(metrics, latest_year)
        csr = CsrImpactCalculator(self.settings).calculate(metrics, latest_year)
        disclosure = self.disclosure_score(metrics, latest_year)

        committee = PlaceholderScore(
            value=self.settings.COMMITTEE_EFFECTIVENESS_PLACEHOLDER,
            modeled=False,
            included_in_composite=has_data,
            note=COMMITTEE_PLACEHOLDER_NOTE,
        )

        breakdown = ScoreBreakdown(
            board_independence=board.score,
            committee_effectiveness=committee,
            csr_impact=float(csr.score),
            compliance=compliance.score,
            disclosure=disclosure,
        )

        if has_data:
            composite = round_half_up(clamp(mean([
                Decimal(board.score),
                Decimal(str(committee.value)),
                csr.score,
                Decimal(compliance.score),
                Decimal(disclosure),
            ])))
        else:
            composite = 0

        grade = grade_for_score(composite, self.settings)

        logger.info(
            "governance_score_calculated",
            latest_year=latest_year,
            board_independence=board.score,
            committee_effectiveness=committee.value,
            committee_placeholder_included=committee.included_in_composite,
            csr_impact=float(csr.score),
            compliance=compliance.score,
            disclosure=disclosure,
            score=composite,
            grade=grade.value,
        )

        return GovernanceScore(score=composite, grade=grade, breakdown=breakdown)


def calculate_overall_governance_score(
    records: Iterable[RecordInput],
    settings: Optional[Settings] = None,
) -> GovernanceScore:
    """Composite governance score, grade and breakdown for a company's records."""
    metrics = pool_metrics(parse_records(records))
    return GovernanceCalculator(settings).calculate(metrics)

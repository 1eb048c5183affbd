#esg_engine/models/summary.py
"""
Derived result shapes - computed on every call, never persisted.

Every model serialises to plain JSON via model_dump(mode="json").
Defaults encode "not reported": empty strings, 0, False and Trend.STABLE.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from esg_engine.models.enumerations import Grade, Trend
from esg_engine.models.metric import AreaOfInterest, CompanyRef, Metric


class CategoryBucket(BaseModel):
    """Metrics that fell into one category or sub-category."""
    count: int = 0
    metrics: List[Metric] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Extractor summaries
# ---------------------------------------------------------------------------

class BoardSizeMetrics(BaseModel):
    value: str = "N/A"
    year: int = 0
    trend: Trend = Trend.STABLE


class BoardMeetingMetrics(BaseModel):
    count: float = 0
    year: int = 0
    trend: Trend = Trend.STABLE


class BoardCompositionMetrics(BaseModel):
    board_size: BoardSizeMetrics = Field(default_factory=BoardSizeMetrics)
    board_meetings: BoardMeetingMetrics = Field(default_factory=BoardMeetingMetrics)


class CommitteeComposition(BaseModel):
    """Director-class shares of one committee. Empty string = not reported."""
    executive_percent: str = ""
    non_executive_percent: str = ""
    independent_percent: str = ""
    year: int = 0


class CommitteeMetrics(BaseModel):
    audit_compliance: CommitteeComposition = Field(default_factory=CommitteeComposition)
    risk_management: CommitteeComposition = Field(default_factory=CommitteeComposition)
    remuneration_nominations: CommitteeComposition = Field(default_factory=CommitteeComposition)
    stakeholder_engagement: CommitteeComposition = Field(default_factory=CommitteeComposition)

    def independent_percents(self) -> List[str]:
        return [
            self.audit_compliance.independent_percent,
            self.risk_management.independent_percent,
            self.remuneration_nominations.independent_percent,
            self.stakeholder_engagement.independent_percent,
        ]


class EducationAttendance(BaseModel):
    males: float = 0
    females: float = 0
    total: float = 0
    year: int = 0


class HealthWellbeing(BaseModel):
    hospital_attendees: float = 0
    year: int = 0


class CsrMetrics(BaseModel):
    education: EducationAttendance = Field(default_factory=EducationAttendance)
    health_wellbeing: HealthWellbeing = Field(default_factory=HealthWellbeing)


class Procurement(BaseModel):
    local: str = ""
    foreign: str = ""
    total: str = ""
    year: int = 0


class SupplierCount(BaseModel):
    count: float = 0
    year: int = 0
    trend: Trend = Trend.STABLE


class SupplierMetrics(BaseModel):
    procurement: Procurement = Field(default_factory=Procurement)
    suppliers_count: SupplierCount = Field(default_factory=SupplierCount)


class StatusFact(BaseModel):
    status: bool = False
    year: int = 0


class TextFact(BaseModel):
    status: str = ""
    year: int = 0


class WhistleblowingFact(BaseModel):
    mechanism: str = ""
    year: int = 0


class IncidentFact(BaseModel):
    count: str = ""
    year: int = 0


class ComplianceMetrics(BaseModel):
    ethics_code: StatusFact = Field(default_factory=StatusFact)
    anti_corruption: StatusFact = Field(default_factory=StatusFact)
    whistleblowing: WhistleblowingFact = Field(default_factory=WhistleblowingFact)
    incidents: IncidentFact = Field(default_factory=IncidentFact)
    supplier_code: StatusFact = Field(default_factory=StatusFact)
    ifrs_compliance: TextFact = Field(default_factory=TextFact)


class RemunerationMetrics(BaseModel):
    disclosure: TextFact = Field(default_factory=TextFact)
    esg_linked: StatusFact = Field(default_factory=StatusFact)


class GovernanceSummary(BaseModel):
    """All six sub-domain summaries, extracted against one shared latest year."""
    latest_year: int = 0
    board_composition: BoardCompositionMetrics = Field(default_factory=BoardCompositionMetrics)
    committees: CommitteeMetrics = Field(default_factory=CommitteeMetrics)
    csr: CsrMetrics = Field(default_factory=CsrMetrics)
    suppliers: SupplierMetrics = Field(default_factory=SupplierMetrics)
    compliance: ComplianceMetrics = Field(default_factory=ComplianceMetrics)
    remuneration: RemunerationMetrics = Field(default_factory=RemunerationMetrics)


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------

class PlaceholderScore(BaseModel):
    """A sub-score that is not modelled yet and carries a fixed stand-in value."""
    value: float
    modeled: bool = False
    included_in_composite: bool = True
    note: str = ""


class ScoreBreakdown(BaseModel):
    board_independence: int = Field(default=0, ge=0, le=100)
    committee_effectiveness: PlaceholderScore
    csr_impact: float = Field(default=0, ge=0, le=100)
    compliance: int = Field(default=0, ge=0, le=100)
    disclosure: int = Field(default=0, ge=0, le=100)


class GovernanceScore(BaseModel):
    """Composite governance score, always returned with its breakdown."""
    score: int = Field(..., ge=0, le=100)
    grade: Grade
    breakdown: ScoreBreakdown


# ---------------------------------------------------------------------------
# Company summary & dashboard views
# ---------------------------------------------------------------------------

class CategorySummary(BaseModel):
    category: str
    total_metrics: int = 0
    metrics_by_unit: Dict[str, int] = Field(default_factory=dict)
    has_time_series: bool = False
    latest_year: int = 0


class CompanyEsgSummary(BaseModel):
    company: Optional[CompanyRef] = None
    reporting_years: List[int] = Field(default_factory=list)
    categories_summary: List[CategorySummary] = Field(default_factory=list)
    total_metrics: int = 0
    data_quality_score: Optional[float] = None
    verification_status: str = "unknown"
    last_updated: Optional[datetime] = None
    api_version: str = "1.0.0"
    area_of_interest: Optional[AreaOfInterest] = None


class TimeSeriesPoint(BaseModel):
    """One chart-ready observation."""
    year: int
    value: float
    source_notes: str = ""


class BoardIndependenceView(BaseModel):
    audit: str = ""
    risk: str = ""
    remuneration: str = ""
    stakeholder: str = ""


class BoardView(BaseModel):
    size: BoardSizeMetrics
    meetings: BoardMeetingMetrics
    independence: BoardIndependenceView


class CsrView(BaseModel):
    education: EducationAttendance
    health: HealthWellbeing


class ProcurementView(BaseModel):
    local_spend: str = ""
    foreign_spend: str = ""
    total_spend: str = ""
    supplier_count: SupplierCount


class ComplianceView(BaseModel):
    ethics: StatusFact
    anti_corruption: StatusFact
    whistleblowing: WhistleblowingFact
    incidents: IncidentFact


class DisclosureView(BaseModel):
    remuneration: TextFact
    esg_linked: StatusFact


class KeyMetrics(BaseModel):
    """Flat, dashboard-friendly reshaping of the six extractor outputs."""
    latest_year: int = 0
    board: BoardView
    csr: CsrView
    procurement: ProcurementView
    compliance: ComplianceView
    disclosure: DisclosureView

"""
Sub-domain Extractors
esg_engine/pipelines/extractors.py

Six independent extractors (board composition, committees, CSR, suppliers,
compliance, remuneration). Each scans the pooled metric list and returns a
typed summary for one sub-domain.

Every extractor takes the same `latest_year`, computed once by
ingest.get_latest_year(), so all of them agree on the "current" year.
Absent metrics produce the documented defaults; extractors never raise.
"""

from typing import Iterable, Optional, Sequence

import structlog

from esg_engine.config import Settings, get_settings
from esg_engine.models.enumerations import Committee, DirectorClass, MetricName, ProcurementOrigin
from esg_engine.models.metric import Metric
from esg_engine.models.summary import (
    BoardCompositionMetrics,
    BoardMeetingMetrics,
    BoardSizeMetrics,
    CommitteeComposition,
    CommitteeMetrics,
    ComplianceMetrics,
    CsrMetrics,
    GovernanceSummary,
    RemunerationMetrics,
    SupplierMetrics,
)
from esg_engine.pipelines.ingest import RecordInput, get_latest_year, parse_records, pool_metrics
from esg_engine.pipelines.money import format_millions, parse_money
from esg_engine.pipelines.utils import (
    compute_trend,
    find_metric,
    latest_and_previous,
    parse_leading_int,
    value_for_year,
)

logger = structlog.get_logger(__name__)

# Committee -> attribute on CommitteeMetrics
_COMMITTEE_FIELDS = {
    Committee.AUDIT_COMPLIANCE: "audit_compliance",
    Committee.RISK_MANAGEMENT: "risk_management",
    Committee.REMUNERATION_NOMINATIONS: "remuneration_nominations",
    Committee.STAKEHOLDER_ENGAGEMENT: "stakeholder_engagement",
}

# Director class -> attribute on CommitteeComposition
_DIRECTOR_FIELDS = {
    DirectorClass.EXECUTIVE: "executive_percent",
    DirectorClass.NON_EXECUTIVE: "non_executive_percent",
    DirectorClass.INDEPENDENT_NON_EXECUTIVE: "independent_percent",
}


def _reported_at(metrics: Sequence[Metric], name: MetricName, year: int, unit: Optional[str] = None):
    """Decoded value of a metric at `year`, or None when the metric/year is absent."""
    value = value_for_year(find_metric(metrics, name.value, unit), year)
    return value.reported if value is not None else None


# ---------------------------------------------------------------------------
# Board composition
# ---------------------------------------------------------------------------

def get_board_size_metrics(metrics: Sequence[Metric]) -> Optional[BoardSizeMetrics]:
    """
    Board size from the metric's most recent value, with trend.

    Board size is compared as the integer prefix of the raw value
    ("11 members" -> 11). Returns None when the metric is absent.
    """
    latest, previous = latest_and_previous(find_metric(metrics, MetricName.BOARD_SIZE.value))
    if latest is None:
        return None
    trend = compute_trend(
        parse_leading_int(latest.value),
        parse_leading_int(previous.value) if previous else None,
    )
    return BoardSizeMetrics(value=latest.value, year=latest.year, trend=trend)


def get_board_meeting_metrics(metrics: Sequence[Metric]) -> Optional[BoardMeetingMetrics]:
    """Number of board meetings from the most recent value, compared on numeric_value."""
    latest, previous = latest_and_previous(find_metric(metrics, MetricName.BOARD_MEETINGS.value))
    if latest is None:
        return None
    trend = compute_trend(
        latest.numeric_value,
        previous.numeric_value if previous else None,
    )
    return BoardMeetingMetrics(count=latest.numeric_value or 0, year=latest.year, trend=trend)


def get_board_composition_metrics(
    metrics: Sequence[Metric],
    latest_year: int,
) -> BoardCompositionMetrics:
    # Read at each metric's own most recent year, not at latest_year
    return BoardCompositionMetrics(
        board_size=get_board_size_metrics(metrics) or BoardSizeMetrics(),
        board_meetings=get_board_meeting_metrics(metrics) or BoardMeetingMetrics(),
    )


# ---------------------------------------------------------------------------
# Committees
# ---------------------------------------------------------------------------

def get_committee_metrics(metrics: Sequence[Metric], latest_year: int) -> CommitteeMetrics:
    """
    Director-class composition of the four board committees at `latest_year`.

    Each committee is reported as up to three metrics sharing a name and
    distinguished by `unit`. A class that is not reported stays "" so it can
    be told apart from a reported "0%". `year` is set once the independent
    share is found.
    """
    result = CommitteeMetrics()
    for committee, committee_field in _COMMITTEE_FIELDS.items():
        composition = CommitteeComposition()
        for director_class, director_field in _DIRECTOR_FIELDS.items():
            metric = find_metric(metrics, committee.value, director_class.value)
            value = value_for_year(metric, latest_year)
            if value is None:
                continue
            setattr(composition, director_field, value.value)
            if director_class is DirectorClass.INDEPENDENT_NON_EXECUTIVE:
                composition.year = latest_year
        setattr(result, committee_field, composition)
    return result


# ---------------------------------------------------------------------------
# CSR
# ---------------------------------------------------------------------------

def get_csr_metrics(metrics: Sequence[Metric], latest_year: int) -> CsrMetrics:
    """Education attendance (males, females, total) and hospital attendees at `latest_year`."""
    result = CsrMetrics()

    males = value_for_year(find_metric(metrics, MetricName.EDUCATION_MALES.value), latest_year)
    females = value_for_year(find_metric(metrics, MetricName.EDUCATION_FEMALES.value), latest_year)
    for value, field in ((males, "males"), (females, "females")):
        if value is not None and value.numeric_value is not None:
            setattr(result.education, field, value.numeric_value)
            result.education.year = latest_year
    result.education.total = result.education.males + result.education.females

    attendees = value_for_year(find_metric(metrics, MetricName.HOSPITAL_ATTENDEES.value), latest_year)
    if attendees is not None and attendees.numeric_value is not None:
        result.health_wellbeing.hospital_attendees = attendees.numeric_value
        result.health_wellbeing.year = latest_year

    return result


# ---------------------------------------------------------------------------
# Suppliers
# ---------------------------------------------------------------------------

def get_supplier_metrics(
    metrics: Sequence[Metric],
    latest_year: int,
    settings: Optional[Settings] = None,
) -> SupplierMetrics:
    """
    Local/foreign procurement spend and supplier count at `latest_year`.

    `total` is only filled when both spend strings parse as money; an
    unparseable amount leaves it empty rather than counting as zero.
    """
    settings = settings or get_settings()
    result = SupplierMetrics()

    for origin, field in ((ProcurementOrigin.LOCAL, "local"), (ProcurementOrigin.FOREIGN, "foreign")):
        metric = find_metric(metrics, MetricName.PROCUREMENT_SPENT.value, origin.value)
        value = value_for_year(metric, latest_year)
        if value is not None:
            setattr(result.procurement, field, value.value)
            result.procurement.year = latest_year

    apply_multiplier = settings.MONEY_APPLY_SUFFIX_MULTIPLIER
    local = parse_money(result.procurement.local, apply_multiplier)
    foreign = parse_money(result.procurement.foreign, apply_multiplier)
    if local is not None and foreign is not None:
        result.procurement.total = format_millions(local + foreign, apply_multiplier)

    latest, previous = latest_and_previous(
        find_metric(metrics, MetricName.SUPPLIER_COUNT.value), latest_year
    )
    if latest is not None and latest.numeric_value is not None:
        result.suppliers_count.count = latest.numeric_value
        result.suppliers_count.year = latest_year
        result.suppliers_count.trend = compute_trend(
            latest.numeric_value,
            previous.numeric_value if previous else None,
        )

    return result


# ---------------------------------------------------------------------------
# Compliance
# ---------------------------------------------------------------------------

def get_compliance_metrics(metrics: Sequence[Metric], latest_year: int) -> ComplianceMetrics:
    """Six independently optional compliance facts at `latest_year`."""
    result = ComplianceMetrics()

    ethics = _reported_at(metrics, MetricName.ETHICS_CODE, latest_year)
    if ethics is not None:
        result.ethics_code.status = ethics.matches("In place")
        result.ethics_code.year = latest_year

    anti_corruption = _reported_at(metrics, MetricName.ANTI_CORRUPTION, latest_year)
    if anti_corruption is not None:
        result.anti_corruption.status = anti_corruption.matches("Yes")
        result.anti_corruption.year = latest_year

    whistleblowing = value_for_year(find_metric(metrics, MetricName.WHISTLEBLOWING.value), latest_year)
    if whistleblowing is not None:
        result.whistleblowing.mechanism = whistleblowing.value
        result.whistleblowing.year = latest_year

    incidents = value_for_year(find_metric(metrics, MetricName.COMPLIANCE_INCIDENTS.value), latest_year)
    if incidents is not None:
        result.incidents.count = incidents.value
        result.incidents.year = latest_year

    supplier_code = _reported_at(metrics, MetricName.SUPPLIER_CODE, latest_year)
    if supplier_code is not None:
        result.supplier_code.status = supplier_code.matches("In place")
        result.supplier_code.year = latest_year

    ifrs = value_for_year(find_metric(metrics, MetricName.IFRS_DISCLOSURE.value), latest_year)
    if ifrs is not None:
        result.ifrs_compliance.status = ifrs.value
        result.ifrs_compliance.year = latest_year

    return result


# ---------------------------------------------------------------------------
# Remuneration
# ---------------------------------------------------------------------------

def get_remuneration_metrics(metrics: Sequence[Metric], latest_year: int) -> RemunerationMetrics:
    """Executive remuneration disclosure status and ESG-linked pay at `latest_year`."""
    result = RemunerationMetrics()

    disclosure = value_for_year(
        find_metric(metrics, MetricName.REMUNERATION_DISCLOSURE.value), latest_year
    )
    if disclosure is not None:
        result.disclosure.status = disclosure.value
        result.disclosure.year = latest_year

    esg_linked = _reported_at(metrics, MetricName.ESG_LINKED_PAY, latest_year)
    if esg_linked is not None:
        result.esg_linked.status = esg_linked.matches("Yes")
        result.esg_linked.year = latest_year

    return result


# ---------------------------------------------------------------------------
# All six
# ---------------------------------------------------------------------------

def extract_governance_summary(
    metrics: Sequence[Metric],
    settings: Optional[Settings] = None,
) -> GovernanceSummary:
    """Run all six extractors against one shared latest year."""
    latest_year = get_latest_year(metrics)
    summary = GovernanceSummary(
        latest_year=latest_year,
        board_composition=get_board_composition_metrics(metrics, latest_year),
        committees=get_committee_metrics(metrics, latest_year),
        csr=get_csr_metrics(metrics, latest_year),
        suppliers=get_supplier_metrics(metrics, latest_year, settings),
        compliance=get_compliance_metrics(metrics, latest_year),
        remuneration=get_remuneration_metrics(metrics, latest_year),
    )
    logger.debug("governance_summary_extracted", metric_count=len(metrics), latest_year=latest_year)
    return summary


def get_governance_summary(
    records: Iterable[RecordInput],
    settings: Optional[Settings] = None,
) -> GovernanceSummary:
    """Validate records, pool their metrics and extract all six summaries."""
    return extract_governance_summary(pool_metrics(parse_records(records)), settings)

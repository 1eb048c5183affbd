"""
Summary Builder
esg_engine/pipelines/summary.py

Company-level rollups built on the grouping engine and extractors:
    get_company_summary    - per-category counts, units, years, data quality
    get_key_metrics        - flat dashboard view of the six extractor outputs
    get_area_of_interest   - company area of interest, carried through
    get_metric_time_series - chart-ready points for one metric
"""

from typing import Dict, Iterable, List, Optional

import structlog

from esg_engine.config import Settings
from esg_engine.models.metric import AreaOfInterest, DataRecord
from esg_engine.models.summary import (
    BoardIndependenceView,
    BoardView,
    CategorySummary,
    CompanyEsgSummary,
    ComplianceView,
    CsrView,
    DisclosureView,
    KeyMetrics,
    ProcurementView,
    TimeSeriesPoint,
)
from esg_engine.pipelines.extractors import extract_governance_summary
from esg_engine.pipelines.grouping import group_by_category
from esg_engine.pipelines.ingest import RecordInput, collect_years, parse_records, pool_metrics
from esg_engine.pipelines.utils import normalize_label, normalize_unit

logger = structlog.get_logger(__name__)

UNKNOWN_UNIT = "unknown"


def _average_quality(records: List[DataRecord]) -> Optional[float]:
    scores = [r.data_quality_score for r in records if r.data_quality_score is not None]
    return sum(scores) / len(scores) if scores else None


def get_company_summary(records: Iterable[RecordInput]) -> CompanyEsgSummary:
    """
    Category-level rollup of a company's records.

    Returns:
        CompanyEsgSummary with:
          - reporting_years: distinct years, ascending
          - categories_summary: per category, metric count, count per unit
            (null unit counted as "unknown"), whether any metric has more
            than one value, and the overall latest year
          - data_quality_score: mean of the non-null record scores, or None
          - verification_status: the first record's status, or "unknown"
          - last_updated: most recent record update timestamp
    """
    validated = parse_records(records)
    years = collect_years(pool_metrics(validated))
    latest_year = years[-1] if years else 0

    categories_summary: List[CategorySummary] = []
    total_metrics = 0
    for category, bucket in group_by_category(validated).items():
        units: Dict[str, int] = {}
        for metric in bucket.metrics:
            unit = metric.unit or UNKNOWN_UNIT
            units[unit] = units.get(unit, 0) + 1
        categories_summary.append(CategorySummary(
            category=category,
            total_metrics=bucket.count,
            metrics_by_unit=units,
            has_time_series=any(len(m.values) > 1 for m in bucket.metrics),
            latest_year=latest_year,
        ))
        total_metrics += bucket.count

    timestamps = [r.last_updated_at for r in validated if r.last_updated_at is not None]
    first = validated[0] if validated else None

    summary = CompanyEsgSummary(
        company=first.company if first else None,
        reporting_years=years,
        categories_summary=categories_summary,
        total_metrics=total_metrics,
        data_quality_score=_average_quality(validated),
        verification_status=first.verification_status if first else "unknown",
        last_updated=max(timestamps) if timestamps else None,
        api_version=first.metadata.api_version if first and first.metadata else "1.0.0",
        area_of_interest=get_area_of_interest(validated),
    )

    logger.info(
        "company_summary_built",
        company=summary.company.name if summary.company else None,
        record_count=len(validated),
        total_metrics=total_metrics,
        reporting_years=years,
    )
    return summary


def get_key_metrics(
    records: Iterable[RecordInput],
    settings: Optional[Settings] = None,
) -> KeyMetrics:
    """Run the six extractors and reshape them for a dashboard."""
    summary = extract_governance_summary(pool_metrics(parse_records(records)), settings)
    board = summary.board_composition
    committees = summary.committees
    suppliers = summary.suppliers
    compliance = summary.compliance

    return KeyMetrics(
        latest_year=summary.latest_year,
        board=BoardView(
            size=board.board_size,
            meetings=board.board_meetings,
            independence=BoardIndependenceView(
                audit=committees.audit_compliance.independent_percent,
                risk=committees.risk_management.independent_percent,
                remuneration=committees.remuneration_nominations.independent_percent,
                stakeholder=committees.stakeholder_engagement.independent_percent,
            ),
        ),
        csr=CsrView(
            education=summary.csr.education,
            health=summary.csr.health_wellbeing,
        ),
        procurement=ProcurementView(
            local_spend=suppliers.procurement.local,
            foreign_spend=suppliers.procurement.foreign,
            total_spend=suppliers.procurement.total,
            supplier_count=suppliers.suppliers_count,
        ),
        compliance=ComplianceView(
            ethics=compliance.ethics_code,
            anti_corruption=compliance.anti_corruption,
            whistleblowing=compliance.whistleblowing,
            incidents=compliance.incidents,
        ),
        disclosure=DisclosureView(
            remuneration=summary.remuneration.disclosure,
            esg_linked=summary.remuneration.esg_linked,
        ),
    )


def get_area_of_interest(records: Iterable[RecordInput]) -> Optional[AreaOfInterest]:
    """The first record's company area of interest, if any."""
    validated = parse_records(records)
    if not validated:
        return None
    return validated[0].company.area_of_interest_metadata


def get_metric_time_series(
    records: Iterable[RecordInput],
    metric_name: str,
    unit: Optional[str] = None,
) -> List[TimeSeriesPoint]:
    """
    Numeric observations of one metric across all records, oldest first.

    Values without a numeric_value are skipped. When several records report
    the same metric and year, each observation is kept.
    """
    wanted_name = normalize_label(metric_name)
    wanted_unit = normalize_unit(unit) if unit is not None else None

    points: List[TimeSeriesPoint] = []
    for metric in pool_metrics(parse_records(records)):
        if normalize_label(metric.metric_name) != wanted_name:
            continue
        if wanted_unit is not None and normalize_unit(metric.unit) != wanted_unit:
            continue
        for value in metric.values:
            if value.numeric_value is None:
                continue
            points.append(TimeSeriesPoint(
                year=value.year,
                value=value.numeric_value,
                source_notes=value.source_notes,
            ))
    return sorted(points, key=lambda p: p.year)

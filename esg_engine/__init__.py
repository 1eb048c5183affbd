"""
ESG Governance Metrics Engine

Pure transformation from a company's ESG data records to groupings,
sub-domain summaries and governance scores. No I/O, no shared state.

Public surfaces:
    Grouping      - group_by_category, group_by_sub_category, group_by_year,
                    get_available_years
    Summary       - get_company_summary
    Extractors    - get_board_composition_metrics, get_committee_metrics,
                    get_csr_metrics, get_supplier_metrics,
                    get_compliance_metrics, get_remuneration_metrics
    Scoring       - calculate_board_independence_score,
                    calculate_compliance_score, calculate_csr_impact_score,
                    calculate_overall_governance_score
    Dashboard     - get_key_metrics
"""

from esg_engine.core.exceptions import (
    EsgEngineException,
    InvalidResponseException,
    MalformedRecordException,
)
from esg_engine.pipelines.extractors import (
    extract_governance_summary,
    get_board_composition_metrics,
    get_board_meeting_metrics,
    get_board_size_metrics,
    get_committee_metrics,
    get_compliance_metrics,
    get_csr_metrics,
    get_governance_summary,
    get_remuneration_metrics,
    get_supplier_metrics,
)
from esg_engine.pipelines.grouping import (
    classify_sub_category,
    get_available_years,
    group_by_category,
    group_by_sub_category,
    group_by_year,
)
from esg_engine.pipelines.ingest import (
    filter_records,
    get_latest_year,
    parse_records,
    parse_response,
    pool_metrics,
)
from esg_engine.pipelines.summary import (
    get_area_of_interest,
    get_company_summary,
    get_key_metrics,
    get_metric_time_series,
)
from esg_engine.scoring import (
    calculate_board_independence_score,
    calculate_compliance_score,
    calculate_csr_impact_score,
    calculate_overall_governance_score,
    grade_for_score,
)

__version__ = "1.0.0"

__all__ = [
    # Exceptions
    "EsgEngineException",
    "InvalidResponseException",
    "MalformedRecordException",
    # Ingest
    "filter_records",
    "get_latest_year",
    "parse_records",
    "parse_response",
    "pool_metrics",
    # Grouping
    "classify_sub_category",
    "get_available_years",
    "group_by_category",
    "group_by_sub_category",
    "group_by_year",
    # Extractors
    "extract_governance_summary",
    "get_board_composition_metrics",
    "get_board_meeting_metrics",
    "get_board_size_metrics",
    "get_committee_metrics",
    "get_compliance_metrics",
    "get_csr_metrics",
    "get_governance_summary",
    "get_remuneration_metrics",
    "get_supplier_metrics",
    # Summary
    "get_area_of_interest",
    "get_company_summary",
    "get_key_metrics",
    "get_metric_time_series",
    # Scoring
    "calculate_board_independence_score",
    "calculate_compliance_score",
    "calculate_csr_impact_score",
    "calculate_overall_governance_score",
    "grade_for_score",
]

"""
Grouping Engine
esg_engine/pipelines/grouping.py

Buckets pooled metrics by category, by inferred sub-category and by
reporting year. No metric is dropped or deduplicated: identical entries
from different import batches are counted once per occurrence.

Sub-category classification is an ordered rule table evaluated top to
bottom; the first rule whose keyword occurs in the metric name wins.

  Priority | Sub-category                     | Keywords (case-sensitive substrings)
  ─────────┼──────────────────────────────────┼──────────────────────────────────────
  1        | Board Governance                 | Board
  2        | Board Committees                 | Committee, Audit, Risk, Remuneration, Stakeholder
  3        | Corporate Social Responsibility  | CSR, Social Responsibility, Education, Health
  4        | Supplier & Procurement           | Supplier, Procurement
  5        | Compliance & Ethics              | Ethics, Anti-Corruption, Whistleblowing, Compliance, IFRS
  6        | Executive Remuneration           | Remuneration, Pay
  -        | Other                            | (fallback)

Order matters: "Board Audit Committee" is Board Governance, and
"Executive Remuneration Disclosure" is a Board Committees metric because
rule 2 sees "Remuneration" before rule 6 does.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

import structlog

from esg_engine.models.enumerations import SubCategory
from esg_engine.models.metric import Metric
from esg_engine.models.summary import CategoryBucket
from esg_engine.pipelines.ingest import RecordInput, collect_years, parse_records, pool_metrics

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SubCategoryRule:
    """One row of the classification table."""
    priority: int
    keywords: Tuple[str, ...]
    label: SubCategory

    def matches(self, metric_name: str) -> bool:
        return any(keyword in metric_name for keyword in self.keywords)


SUB_CATEGORY_RULES: Tuple[SubCategoryRule, ...] = (
    SubCategoryRule(1, ("Board",), SubCategory.BOARD_GOVERNANCE),
    SubCategoryRule(
        2,
        ("Committee", "Audit", "Risk", "Remuneration", "Stakeholder"),
        SubCategory.BOARD_COMMITTEES,
    ),
    SubCategoryRule(
        3,
        ("CSR", "Social Responsibility", "Education", "Health"),
        SubCategory.CORPORATE_SOCIAL_RESPONSIBILITY,
    ),
    SubCategoryRule(4, ("Supplier", "Procurement"), SubCategory.SUPPLIER_PROCUREMENT),
    SubCategoryRule(
        5,
        ("Ethics", "Anti-Corruption", "Whistleblowing", "Compliance", "IFRS"),
        SubCategory.COMPLIANCE_ETHICS,
    ),
    SubCategoryRule(6, ("Remuneration", "Pay"), SubCategory.EXECUTIVE_REMUNERATION),
)


def classify_sub_category(metric_name: str) -> SubCategory:
    """Label of the first matching rule, or Other."""
    for rule in sorted(SUB_CATEGORY_RULES, key=lambda r: r.priority):
        if rule.matches(metric_name):
            return rule.label
    return SubCategory.OTHER


def _bucket(metrics: Iterable[Metric], key_fn) -> Dict[str, CategoryBucket]:
    result: Dict[str, CategoryBucket] = {}
    for metric in metrics:
        key = key_fn(metric)
        bucket = result.setdefault(key, CategoryBucket())
        bucket.metrics.append(metric)
        bucket.count += 1
    return result


def group_by_category(records: Iterable[RecordInput]) -> Dict[str, CategoryBucket]:
    """Metrics keyed by lower-cased category, with a count per bucket."""
    metrics = pool_metrics(parse_records(records))
    result = _bucket(metrics, lambda m: m.category.lower())
    logger.debug("grouped_by_category", metric_count=len(metrics), categories=sorted(result))
    return result


def group_by_sub_category(records: Iterable[RecordInput]) -> Dict[str, CategoryBucket]:
    """Metrics keyed by sub-category label (see SUB_CATEGORY_RULES)."""
    metrics = pool_metrics(parse_records(records))
    result = _bucket(metrics, lambda m: classify_sub_category(m.metric_name).value)
    logger.debug("grouped_by_sub_category", metric_count=len(metrics), sub_categories=sorted(result))
    return result


def group_by_year(records: Iterable[RecordInput]) -> Dict[int, Dict[str, List[Metric]]]:
    """
    year -> category -> single-value metric copies.

    Each (metric, value) pair becomes a copy of the metric holding only that
    value, so a year-scoped view never sees another year's numbers.
    """
    result: Dict[int, Dict[str, List[Metric]]] = {}
    for metric in pool_metrics(parse_records(records)):
        category = metric.category.lower()
        for value in metric.values:
            projected = metric.model_copy(update={"values": (value,)})
            result.setdefault(value.year, {}).setdefault(category, []).append(projected)
    return result


def get_available_years(records: Iterable[RecordInput]) -> List[int]:
    """Distinct reporting years across all metric values, ascending."""
    return collect_years(pool_metrics(parse_records(records)))

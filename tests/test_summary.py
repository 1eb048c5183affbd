# tests/test_summary.py

"""
Summary Tests - company summary, key metrics, time series, area of interest
"""

from datetime import datetime, timezone

from esg_engine.models.enumerations import Trend
from esg_engine.pipelines.summary import (
    get_area_of_interest,
    get_company_summary,
    get_key_metrics,
    get_metric_time_series,
)


class TestCompanySummary:

    def test_sample_summary(self, governance_records):
        summary = get_company_summary(governance_records)
        assert summary.company.name == "Mazowe Agro Holdings"
        assert summary.reporting_years == [2022, 2023]
        assert summary.total_metrics == 24
        assert summary.data_quality_score == 82.0
        assert summary.verification_status == "verified"
        assert summary.api_version == "1.2.0"
        assert summary.last_updated == datetime(2024, 4, 2, 10, 15, tzinfo=timezone.utc)

    def test_category_rollup(self, governance_records):
        [category] = get_company_summary(governance_records).categories_summary
        assert category.category == "governance"
        assert category.total_metrics == 24
        assert category.has_time_series is True
        assert category.latest_year == 2023
        assert category.metrics_by_unit["unknown"] == 8
        assert category.metrics_by_unit["Independent Non-executive Directors"] == 4
        assert sum(category.metrics_by_unit.values()) == 24

    def test_no_time_series_when_single_values(self, metric_factory, record_factory):
        records = [record_factory([metric_factory("Board Size", [(2023, "9")])])]
        [category] = get_company_summary(records).categories_summary
        assert category.has_time_series is False

    def test_quality_averaged_over_scored_records(self, governance_metrics, record_factory):
        records = [
            record_factory(governance_metrics, data_quality_score=82.0),
            record_factory(governance_metrics, data_quality_score=None),
            record_factory(governance_metrics, data_quality_score=70.0,
                           last_updated_at="2024-06-30T00:00:00Z"),
        ]
        summary = get_company_summary(records)
        assert summary.data_quality_score == 76.0
        assert summary.total_metrics == 72
        assert summary.last_updated == datetime(2024, 6, 30, tzinfo=timezone.utc)

    def test_defaults_without_metadata(self, record_factory):
        summary = get_company_summary([record_factory([], metadata=None)])
        assert summary.api_version == "1.0.0"
        assert summary.categories_summary == []
        assert summary.data_quality_score is None

    def test_empty_input(self):
        summary = get_company_summary([])
        assert summary.company is None
        assert summary.verification_status == "unknown"
        assert summary.reporting_years == []


class TestKeyMetrics:

    def test_sample_key_metrics(self, governance_records, settings):
        key = get_key_metrics(governance_records, settings)
        assert key.latest_year == 2023
        assert key.board.size.value == "11"
        assert key.board.meetings.trend is Trend.DECREASING
        assert key.board.independence.audit == "67%"
        assert key.board.independence.stakeholder == "Not reported"
        assert key.csr.education.total == 2800
        assert key.procurement.total_spend == "US$15.7m"
        assert key.procurement.supplier_count.count == 452
        assert key.compliance.incidents.count == "0 incidents"
        assert key.disclosure.remuneration.status == "Fully disclosed"

    def test_empty_key_metrics(self, empty_records, settings):
        key = get_key_metrics(empty_records, settings)
        assert key.latest_year == 0
        assert key.board.size.value == "N/A"
        assert key.procurement.total_spend == ""


class TestTimeSeries:

    def test_board_size_series(self, governance_records):
        points = get_metric_time_series(governance_records, "Board Size")
        assert [(p.year, p.value) for p in points] == [(2022, 9.0), (2023, 11.0)]

    def test_sorted_by_year(self, metric_factory, record_factory):
        records = [record_factory([
            metric_factory("Number of suppliers", [(2023, "400"), (2021, "300"), (2022, "410")]),
        ])]
        points = get_metric_time_series(records, "Number of suppliers")
        assert [p.year for p in points] == [2021, 2022, 2023]

    def test_name_spacing_tolerated(self, governance_records):
        points = get_metric_time_series(
            governance_records, "Corporate Social Responsibility - Education Attendance - [Males]"
        )
        assert [p.value for p in points] == [1200.0, 1500.0]

    def test_unit_filter_and_non_numeric_skipped(self, governance_records):
        points = get_metric_time_series(
            governance_records, "Audit and Compliance Committee", unit="Independent Non-executive Directors"
        )
        assert points == []

    def test_unknown_metric(self, governance_records):
        assert get_metric_time_series(governance_records, "Water use") == []


class TestAreaOfInterest:

    def test_carried_through(self, governance_records):
        area = get_area_of_interest(governance_records)
        assert area.name == "Mazowe Estates"
        assert len(area.coordinates) == 2
        assert area.coordinates[0].lat == -17.51

    def test_empty(self):
        assert get_area_of_interest([]) is None

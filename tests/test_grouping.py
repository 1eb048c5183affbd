# tests/test_grouping.py

"""
Grouping Engine Tests - category, sub-category and year buckets
"""

import pytest

from esg_engine.models.enumerations import SubCategory
from esg_engine.pipelines.grouping import (
    SUB_CATEGORY_RULES,
    classify_sub_category,
    get_available_years,
    group_by_category,
    group_by_sub_category,
    group_by_year,
)


class TestClassifySubCategory:
    """Tests for the ordered sub-category rule table."""

    @pytest.mark.parametrize("name, expected", [
        ("Board Size", SubCategory.BOARD_GOVERNANCE),
        ("Board Attendance - Number of meetings held", SubCategory.BOARD_GOVERNANCE),
        ("Audit and Compliance Committee", SubCategory.BOARD_COMMITTEES),
        ("Risk Management & Sustainability Committee", SubCategory.BOARD_COMMITTEES),
        ("Stakeholder Engagement Committee", SubCategory.BOARD_COMMITTEES),
        ("Corporate Social Responsibility - Education Attendance - [Males]",
         SubCategory.CORPORATE_SOCIAL_RESPONSIBILITY),
        ("Health and Well being - Hospital attendees - Total",
         SubCategory.CORPORATE_SOCIAL_RESPONSIBILITY),
        ("CSR Spend", SubCategory.CORPORATE_SOCIAL_RESPONSIBILITY),
        ("Relationship with suppliers - Procurement Spent", SubCategory.SUPPLIER_PROCUREMENT),
        ("Supplier Code of Conduct", SubCategory.SUPPLIER_PROCUREMENT),
        ("Ethics / Code of Conduct", SubCategory.COMPLIANCE_ETHICS),
        ("Anti-Corruption / Anti-Bribery Policy", SubCategory.COMPLIANCE_ETHICS),
        ("Whistleblowing Mechanism", SubCategory.COMPLIANCE_ETHICS),
        ("IFRS / Sustainability-Related Financial Disclosures", SubCategory.COMPLIANCE_ETHICS),
        ("ESG Linked to Executive Pay", SubCategory.EXECUTIVE_REMUNERATION),
        ("Water withdrawal", SubCategory.OTHER),
    ])
    def test_rule_table(self, name, expected):
        assert classify_sub_category(name) is expected

    def test_first_rule_wins(self):
        """"Board" outranks "Audit" and "Committee"."""
        assert classify_sub_category("Board Audit Committee") is SubCategory.BOARD_GOVERNANCE

    def test_remuneration_disclosure_is_a_committee_metric(self):
        assert classify_sub_category("Executive Remuneration Disclosure") is SubCategory.BOARD_COMMITTEES

    def test_keywords_are_case_sensitive(self):
        assert classify_sub_category("Number of suppliers") is SubCategory.OTHER
        assert classify_sub_category("board size") is SubCategory.OTHER

    def test_rules_are_in_priority_order(self):
        assert [r.priority for r in SUB_CATEGORY_RULES] == [1, 2, 3, 4, 5, 6]


class TestGroupByCategory:
    """Tests for group_by_category()."""

    def test_single_category(self, governance_records):
        groups = group_by_category(governance_records)
        assert list(groups) == ["governance"]
        assert groups["governance"].count == 24

    def test_categories_lower_cased_and_merged(self, metric_factory, record_factory):
        records = [record_factory([
            metric_factory("Board Size", [(2023, "9")], category="Governance"),
            metric_factory("Board Size", [(2022, "8")], category="GOVERNANCE"),
            metric_factory("Water use", [(2023, "120")], category="Environmental"),
        ])]
        groups = group_by_category(records)
        assert groups["governance"].count == 2
        assert groups["environmental"].count == 1

    def test_duplicates_across_records_counted_twice(self, governance_records):
        groups = group_by_category(governance_records * 2)
        assert groups["governance"].count == 48

    def test_empty(self, empty_records):
        assert group_by_category(empty_records) == {}


class TestGroupBySubCategory:
    """Tests for group_by_sub_category()."""

    def test_sample_distribution(self, governance_records):
        groups = group_by_sub_category(governance_records)
        counts = {label: bucket.count for label, bucket in groups.items()}
        assert counts == {
            "Board Governance": 2,
            "Board Committees": 9,
            "Corporate Social Responsibility": 3,
            "Supplier & Procurement": 3,
            "Compliance & Ethics": 5,
            "Executive Remuneration": 1,
            "Other": 1,
        }

    def test_counts_match_bucket_sizes(self, governance_records):
        for bucket in group_by_sub_category(governance_records).values():
            assert bucket.count == len(bucket.metrics)


class TestGroupByYear:
    """Tests for group_by_year() and get_available_years()."""

    def test_every_value_lands_in_its_year(self, governance_records):
        groups = group_by_year(governance_records)
        assert sorted(groups) == [2022, 2023]
        for year, categories in groups.items():
            for metrics in categories.values():
                assert all(m.values[0].year == year and len(m.values) == 1 for m in metrics)

    def test_value_count_preserved(self, governance_records, governance_metrics):
        groups = group_by_year(governance_records)
        exploded = sum(len(ms) for cats in groups.values() for ms in cats.values())
        assert exploded == sum(len(m["values"]) for m in governance_metrics)

    def test_projection_leaves_input_untouched(self, metric_factory, record_factory):
        records = [record_factory([metric_factory("Board Size", [(2022, "9"), (2023, "11")])])]
        groups = group_by_year(records)
        assert groups[2022]["governance"][0].values[0].value == "9"
        assert groups[2023]["governance"][0].values[0].value == "11"
        assert len(records[0]["metrics"][0]["values"]) == 2

    def test_available_years(self, governance_records):
        assert get_available_years(governance_records) == [2022, 2023]

    def test_available_years_empty(self, empty_records):
        assert get_available_years(empty_records) == []

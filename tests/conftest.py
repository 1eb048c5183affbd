# tests/conftest.py

"""
Pytest Fixtures - Shared governance records for all engine tests

SAMPLE DATA REFERENCE (Mazowe Agro Holdings, governance category):
- Reporting years: 2022, 2023 (latest_year = 2023)
- Board Size: 9 -> 11 (increasing); meetings 6 -> 5 (decreasing)
- Independent NEDs 2023: audit 67%, risk 60%, remuneration 75%, stakeholder "Not reported"
- Education attendance 2023: 1500 males + 1300 females; hospital attendees 24000
- Procurement 2023: US$12.5m local, US$3.2m foreign; suppliers 410 -> 452
- Compliance 2023: every checklist item passes
- Remuneration 2023: "Fully disclosed", ESG-linked pay "No"

Expected scores: board independence 73, CSR 31.0, compliance 100,
disclosure 70, composite 70 (C).
"""

import pytest

from esg_engine.config import Settings


def make_value(year, value, numeric_value=..., source_notes=""):
    """MetricValue payload; numeric_value is derived from plain numbers unless given."""
    payload = {
        "year": year,
        "value": value,
        "source_notes": source_notes,
        "added_at": f"{year + 1}-03-01T09:00:00Z",
    }
    if numeric_value is not ...:
        payload["numeric_value"] = numeric_value
    return payload


def make_metric(name, values, unit=None, category="Governance", description=None):
    """Metric payload; `values` is a list of (year, raw) tuples or value payloads."""
    return {
        "category": category,
        "metric_name": name,
        "unit": unit,
        "description": description,
        "values": [v if isinstance(v, dict) else make_value(*v) for v in values],
        "is_active": True,
    }


def make_record(metrics, company, **overrides):
    record = {
        "_id": "rec-2023-001",
        "company": company,
        "reporting_period_start": 2022,
        "reporting_period_end": 2023,
        "data_source": "annual_report",
        "import_batch_id": "batch-0001",
        "data_quality_score": None,
        "verification_status": "verified",
        "validation_status": "validated",
        "metrics": metrics,
        "last_updated_at": "2024-04-02T10:15:00Z",
        "metadata": {"api_version": "1.2.0", "calculation_version": "1.0.0"},
    }
    record.update(overrides)
    return record


# =============================================================================
# FACTORY FIXTURES
# =============================================================================

@pytest.fixture
def value_factory():
    return make_value


@pytest.fixture
def metric_factory():
    return make_metric


@pytest.fixture
def record_factory(company):
    """Build a record for the sample company: record_factory(metrics, **overrides)."""
    def _make(metrics, **overrides):
        return make_record(metrics, company, **overrides)
    return _make


# =============================================================================
# SAMPLE COMPANY
# =============================================================================

@pytest.fixture
def company():
    """Sample company reference as delivered by the backend."""
    return {
        "_id": "64f1c2a9e1b2c3d4e5f60718",
        "name": "Mazowe Agro Holdings",
        "registrationNumber": "ZW-1987-0042",
        "industry": "Agriculture",
        "country": "Zimbabwe",
        "website": "https://mazowe.example.com",
        "area_of_interest_metadata": {
            "name": "Mazowe Estates",
            "area_covered": "12,400 ha",
            "coordinates": [
                {"lat": -17.51, "lon": 30.97, "_id": "c1"},
                {"lat": -17.49, "lon": 31.02, "_id": "c2"},
            ],
        },
        "esg_contact_person": {
            "name": "R. Moyo",
            "email": "esg@mazowe.example.com",
            "phone": "+263 4 000 000",
        },
        "esg_reporting_framework": ["GRI", "IFRS S1"],
        "latest_esg_report_year": 2023,
        "has_esg_linked_pay": False,
    }


# =============================================================================
# GOVERNANCE METRICS
# =============================================================================

@pytest.fixture
def governance_metrics():
    """24 governance metrics over 2022-2023, names as reported (stray spaces included)."""
    return [
        # Board
        make_metric("Board Size", [(2022, "9"), (2023, "11")], unit="Directors"),
        make_metric(
            "Board Attendance - Number of meetings held",
            [(2022, "6"), (2023, "5")],
            unit="Meetings",
        ),
        # Committees
        make_metric(
            "Audit and Compliance Committee",
            [(2022, "100%"), (2023, "100%")],
            unit="Non-exe cutive Directors",
        ),
        make_metric(
            "Audit and Compliance Committee",
            [(2022, "60%"), (2023, "67%")],
            unit="Independent Non-executive Directors",
        ),
        make_metric(
            "Risk Management & Sustainability Committee",
            [(2023, "20%")],
            unit="Executive Directors",
        ),
        make_metric(
            "Risk Management & Sustainability Committee",
            [(2023, "80%")],
            unit="Non-executive Directors",
        ),
        make_metric(
            "Risk Management & Sustainability Committee",
            [(2023, "60%")],
            unit="Independent Non-executive Directors",
        ),
        make_metric(
            "Remunerations and Nominations Committee",
            [(2023, "100%")],
            unit="Non-executive Directors",
        ),
        make_metric(
            "Remunerations and Nominations Committee",
            [(2023, "75%")],
            unit="Independent Non-executive Directors",
        ),
        make_metric(
            "Stakeholder Engagement Committee",
            [(2023, "Not reported")],
            unit="Independent Non-executive Directors",
        ),
        # CSR
        make_metric(
            "Corporate Social Responsibility - Education Attendance -  [Males]",
            [(2022, "1200"), (2023, "1500")],
            unit="Attendees",
        ),
        make_metric(
            "Corporate Social Responsibility - Education Attendance -  [Females]",
            [(2023, "1300")],
            unit="Attendees",
        ),
        make_metric(
            "Health and Well being - Hospital attendees  - Total",
            [(2023, "24000")],
            unit="Attendees",
        ),
        # Suppliers
        make_metric(
            "Relationship with suppliers - Procurement Spent",
            [(2022, "US$11.0m"), (2023, "US$12.5m")],
            unit="Local suppliers",
        ),
        make_metric(
            "Relationship with suppliers - Procurement Spent",
            [(2023, "US$3.2m")],
            unit="Foreign suppliers",
        ),
        make_metric("Number of suppliers", [(2022, "410"), (2023, "452")], unit="Suppliers"),
        # Compliance
        make_metric("Ethics / Code of Conduct", [(2023, "In place")]),
        make_metric("Anti-Corruption / Anti-Bribery Policy", [(2023, "Yes")]),
        make_metric(
            "Whistleblowing Mechanism",
            [(2023, "Independent anonymous hotline")],
        ),
        make_metric("Compliance Incidents", [(2023, "0 incidents")]),
        make_metric("Supplier Code of Conduct", [(2023, "In place")]),
        make_metric(
            "IFRS / Sustainability-Related Financial Disclosures",
            [(2022, "Not started"), (2023, "Partial alignment with IFRS S1 and S2")],
        ),
        # Remuneration
        make_metric("Executive Remuneration Disclosure", [(2023, "Fully disclosed")]),
        make_metric("ESG Linked to Executive Pay", [(2023, "No")]),
    ]


@pytest.fixture
def governance_records(company, governance_metrics):
    """A single import batch holding the full governance metric set."""
    return [make_record(governance_metrics, company, data_quality_score=82.0)]


@pytest.fixture
def empty_records(company):
    """A valid company with no metrics at all."""
    return [make_record([], company)]


@pytest.fixture
def settings():
    """Default settings, isolated from any local .env file."""
    return Settings(_env_file=None)

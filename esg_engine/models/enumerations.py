from enum import Enum


class Trend(str, Enum):
    STABLE = "stable"
    INCREASING = "increasing"
    DECREASING = "decreasing"


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class SubCategory(str, Enum):
    BOARD_GOVERNANCE = "Board Governance"
    BOARD_COMMITTEES = "Board Committees"
    CORPORATE_SOCIAL_RESPONSIBILITY = "Corporate Social Responsibility"
    SUPPLIER_PROCUREMENT = "Supplier & Procurement"
    COMPLIANCE_ETHICS = "Compliance & Ethics"
    EXECUTIVE_REMUNERATION = "Executive Remuneration"
    OTHER = "Other"


class Committee(str, Enum):
    AUDIT_COMPLIANCE = "Audit and Compliance Committee"
    RISK_MANAGEMENT = "Risk Management & Sustainability Committee"
    REMUNERATION_NOMINATIONS = "Remunerations and Nominations Committee"
    STAKEHOLDER_ENGAGEMENT = "Stakeholder Engagement Committee"


class DirectorClass(str, Enum):
    """Committee composition metrics are split by director class in `unit`."""
    EXECUTIVE = "Executive Directors"
    NON_EXECUTIVE = "Non-executive Directors"
    INDEPENDENT_NON_EXECUTIVE = "Independent Non-executive Directors"


class ProcurementOrigin(str, Enum):
    LOCAL = "Local suppliers"
    FOREIGN = "Foreign suppliers"


class MetricName(str, Enum):
    """Metric names as reported, whitespace-normalised."""
    BOARD_SIZE = "Board Size"
    BOARD_MEETINGS = "Board Attendance - Number of meetings held"
    EDUCATION_MALES = "Corporate Social Responsibility - Education Attendance - [Males]"
    EDUCATION_FEMALES = "Corporate Social Responsibility - Education Attendance - [Females]"
    HOSPITAL_ATTENDEES = "Health and Well being - Hospital attendees - Total"
    PROCUREMENT_SPENT = "Relationship with suppliers - Procurement Spent"
    SUPPLIER_COUNT = "Number of suppliers"
    ETHICS_CODE = "Ethics / Code of Conduct"
    ANTI_CORRUPTION = "Anti-Corruption / Anti-Bribery Policy"
    WHISTLEBLOWING = "Whistleblowing Mechanism"
    COMPLIANCE_INCIDENTS = "Compliance Incidents"
    SUPPLIER_CODE = "Supplier Code of Conduct"
    IFRS_DISCLOSURE = "IFRS / Sustainability-Related Financial Disclosures"
    REMUNERATION_DISCLOSURE = "Executive Remuneration Disclosure"
    ESG_LINKED_PAY = "ESG Linked to Executive Pay"

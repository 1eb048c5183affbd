"""
scoring/ - Governance Scoring Engine

Modules:
    utils.py                  - Decimal utilities
    board_independence.py     - Board Independence Score
    compliance.py             - Compliance checklist Score
    csr_impact.py             - CSR Impact Score
    governance_calculator.py  - Overall Governance composite + grade
"""

from esg_engine.scoring.board_independence import (
    BoardIndependenceCalculator,
    calculate_board_independence_score,
)
from esg_engine.scoring.compliance import ComplianceCalculator, calculate_compliance_score
from esg_engine.scoring.csr_impact import CsrImpactCalculator, calculate_csr_impact_score
from esg_engine.scoring.governance_calculator import (
    GovernanceCalculator,
    calculate_overall_governance_score,
    grade_for_score,
)

__all__ = [
    "BoardIndependenceCalculator",
    "ComplianceCalculator",
    "CsrImpactCalculator",
    "GovernanceCalculator",
    "calculate_board_independence_score",
    "calculate_compliance_score",
    "calculate_csr_impact_score",
    "calculate_overall_governance_score",
    "grade_for_score",
]

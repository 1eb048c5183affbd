"""
Custom Exceptions - ESG Governance Metrics Engine
esg_engine/core/exceptions.py

Raised only at the ingestion boundary. Missing metrics are never an error.
"""

from typing import Any, Dict, List, Optional


class EsgEngineException(Exception):
    """Base exception for the engine."""

    pass


class MalformedRecordException(EsgEngineException):
    """A data record is missing `company` or `metrics`, or has the wrong shape."""

    def __init__(
        self,
        index: int,
        reason: str,
        errors: Optional[List[Dict[str, Any]]] = None,
    ):
        self.index = index
        self.reason = reason
        self.errors = errors or []
        super().__init__(f"Data record at position {index} is malformed: {reason}")


class InvalidResponseException(EsgEngineException):
    """Backend response envelope has no usable `esgData` list."""

    def __init__(self, message: str = "Response payload has no esgData list"):
        self.message = message
        super().__init__(message)

"""
Core Package - ESG Governance Metrics Engine
esg_engine/core/__init__.py

Core infrastructure: exceptions, logging setup.
"""

from esg_engine.core.exceptions import (
    EsgEngineException,
    InvalidResponseException,
    MalformedRecordException,
)
from esg_engine.core.logging_config import configure_logging

__all__ = [
    # Exceptions
    "EsgEngineException",
    "InvalidResponseException",
    "MalformedRecordException",
    # Logging
    "configure_logging",
]

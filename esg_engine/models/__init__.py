"""
models/ - input records, enumerations and derived result shapes.

Modules:
    enumerations.py - Trend, Grade, SubCategory, Committee, DirectorClass, MetricName
    reported.py     - Reported / NotReported decoding of sentinel strings
    metric.py       - MetricValue, Metric, CompanyRef, DataRecord, EsgDataResponse
    summary.py      - Extractor summaries, score breakdown, company summary
"""

from esg_engine.models.enumerations import (
    Committee,
    DirectorClass,
    Grade,
    MetricName,
    ProcurementOrigin,
    SubCategory,
    Trend,
)
from esg_engine.models.metric import (
    AreaOfInterest,
    CompanyRef,
    DataRecord,
    EsgDataResponse,
    Metric,
    MetricValue,
)
from esg_engine.models.reported import NotReported, Reported, ReportedValue, decode

__all__ = [
    "AreaOfInterest",
    "Committee",
    "CompanyRef",
    "DataRecord",
    "DirectorClass",
    "EsgDataResponse",
    "Grade",
    "Metric",
    "MetricName",
    "MetricValue",
    "NotReported",
    "ProcurementOrigin",
    "Reported",
    "ReportedValue",
    "SubCategory",
    "Trend",
    "decode",
]

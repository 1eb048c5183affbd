#esg_engine/models/metric.py
"""
Metric Record Model - input shapes as delivered by the ESG data backend.

All models are frozen: the engine never mutates its input, and derived
views (e.g. per-year projections) are built with model_copy().
"""

import re
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from esg_engine.models.reported import ReportedValue, decode

_PLAIN_NUMBER = re.compile(r"^[+-]?\d+(?:\.\d+)?$")


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class MetricValue(_FrozenModel):
    """One observation of a metric for one reporting year."""

    year: int = Field(
        ...,
        ge=1000,
        le=9999,
        description="Four-digit calendar year"
    )

    value: str = Field(
        default="",
        description="Raw reported value, e.g. '11', '67%', 'In place'"
    )

    numeric_value: Optional[float] = Field(
        default=None,
        description="Parsed number; None when the raw value is not numeric"
    )

    source_notes: str = ""
    added_at: Optional[datetime] = None
    last_updated_at: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def fill_numeric_value(cls, data: Any) -> Any:
        """Derive numeric_value from a plain-number raw value when it is not supplied."""
        if isinstance(data, dict) and "numeric_value" not in data:
            raw = data.get("value")
            if raw is not None:
                text = str(raw).replace(",", "").strip()
                if _PLAIN_NUMBER.match(text):
                    data = {**data, "numeric_value": float(text)}
        return data

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @field_validator("source_notes", mode="before")
    @classmethod
    def coerce_notes(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @property
    def reported(self) -> ReportedValue:
        return decode(self.value, self.numeric_value)


class Metric(_FrozenModel):
    """A named, categorised measurement reported over one or more years."""

    category: str = Field(..., description="e.g. 'governance'")
    metric_name: str = Field(..., min_length=1)
    unit: Optional[str] = Field(
        default=None,
        description="Unit, or sub-field discriminator such as 'Executive Directors'"
    )
    description: Optional[str] = None
    values: Tuple[MetricValue, ...] = Field(
        default=(),
        description="Insertion order = reporting order, not necessarily chronological"
    )
    is_active: bool = True

    @property
    def years(self) -> Tuple[int, ...]:
        return tuple(v.year for v in self.values)


class Coordinate(_FrozenModel):
    lat: float
    lon: float


class AreaOfInterest(_FrozenModel):
    name: str = ""
    area_covered: str = ""
    coordinates: Tuple[Coordinate, ...] = ()


class ContactPerson(_FrozenModel):
    name: str = ""
    email: str = ""
    phone: str = ""


class CompanyRef(_FrozenModel):
    """Company identity and descriptive fields, carried through untouched."""

    id: Optional[str] = Field(default=None, alias="_id")
    name: str = ""
    registration_number: Optional[str] = Field(default=None, alias="registrationNumber")
    industry: Optional[str] = None
    country: Optional[str] = None
    website: Optional[str] = None
    area_of_interest_metadata: Optional[AreaOfInterest] = None
    esg_contact_person: Optional[ContactPerson] = None
    esg_reporting_framework: Tuple[str, ...] = ()
    latest_esg_report_year: Optional[int] = None
    has_esg_linked_pay: Optional[bool] = None


class RecordMetadata(_FrozenModel):
    api_version: str = "1.0.0"
    calculation_version: Optional[str] = None
    retrieved_at: Optional[datetime] = None


class DataRecord(_FrozenModel):
    """One reporting submission (import batch) for a company."""

    id: Optional[str] = Field(default=None, alias="_id")
    company: CompanyRef
    reporting_period_start: Optional[int] = None
    reporting_period_end: Optional[int] = None
    metrics: Tuple[Metric, ...]
    data_quality_score: Optional[float] = Field(
        default=None,
        description="Backend quality rating, carried through unchecked"
    )
    verification_status: str = "unknown"
    validation_status: Optional[str] = None
    data_source: Optional[str] = None
    import_batch_id: Optional[str] = None
    last_updated_at: Optional[datetime] = None
    metadata: Optional[RecordMetadata] = None


class EsgDataResponse(_FrozenModel):
    """Envelope returned by the backend's esg-data endpoints."""

    message: str = ""
    count: int = 0
    filters: Dict[str, Any] = Field(default_factory=dict, alias="filter")
    versions: Dict[str, str] = Field(default_factory=dict)
    esg_data: Tuple[DataRecord, ...] = Field(..., alias="esgData")

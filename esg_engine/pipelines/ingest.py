"""
Ingestion boundary: validate raw records, pool metrics, fix the latest year.

This is the only place the engine fails hard. A record without `company`
or `metrics` would corrupt every downstream aggregate, so it is rejected
here with MalformedRecordException instead of being skipped.
"""

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

import structlog
from pydantic import ValidationError

from esg_engine.core.exceptions import InvalidResponseException, MalformedRecordException
from esg_engine.models.metric import DataRecord, EsgDataResponse, Metric

logger = structlog.get_logger(__name__)

RecordInput = Union[DataRecord, Mapping[str, Any]]

_REQUIRED_FIELDS = ("company", "metrics")


def parse_records(raw_records: Iterable[RecordInput]) -> List[DataRecord]:
    """
    Validate records into DataRecord models.

    Accepts already-built DataRecord objects (passed through) or mappings
    deserialised from the backend's JSON.

    Raises:
        MalformedRecordException: a record is not a mapping, lacks
            `company` or `metrics`, or fails model validation.
    """
    records: List[DataRecord] = []
    for index, item in enumerate(raw_records):
        if isinstance(item, DataRecord):
            records.append(item)
            continue
        if not isinstance(item, Mapping):
            raise MalformedRecordException(index, f"expected a mapping, got {type(item).__name__}")

        missing = [name for name in _REQUIRED_FIELDS if item.get(name) is None]
        if missing:
            raise MalformedRecordException(index, f"missing required field(s): {', '.join(missing)}")
        if not isinstance(item["metrics"], (list, tuple)):
            raise MalformedRecordException(index, "metrics must be an array")

        try:
            records.append(DataRecord.model_validate(item))
        except ValidationError as exc:
            raise MalformedRecordException(index, "failed validation", errors=exc.errors()) from exc

    logger.debug("records_validated", record_count=len(records))
    return records


def parse_response(payload: Mapping[str, Any]) -> List[DataRecord]:
    """Validate a backend envelope ({message, count, filter, versions, esgData})."""
    if not isinstance(payload, Mapping) or not isinstance(payload.get("esgData"), (list, tuple)):
        raise InvalidResponseException()
    # Records are validated one by one so errors carry their position
    records = parse_records(payload["esgData"])
    envelope = EsgDataResponse.model_validate({**payload, "esgData": records})
    logger.info(
        "esg_response_parsed",
        record_count=len(envelope.esg_data),
        reported_count=envelope.count,
        filters=envelope.filters,
    )
    return list(envelope.esg_data)


def pool_metrics(records: Sequence[DataRecord]) -> List[Metric]:
    """All metrics of all records, in record order. Nothing is deduplicated."""
    return [metric for record in records for metric in record.metrics]


def collect_years(metrics: Iterable[Metric]) -> List[int]:
    return sorted({value.year for metric in metrics for value in metric.values})


def get_latest_year(metrics: Iterable[Metric]) -> int:
    """The single "current" year shared by all extractors; 0 when there is no data."""
    years = collect_years(metrics)
    return years[-1] if years else 0


def filter_records(
    records: Iterable[RecordInput],
    year: Optional[int] = None,
    category: Optional[str] = None,
) -> List[DataRecord]:
    """
    In-memory equivalent of the backend's year/category query filters.

    Keeps metrics of `category` (case-insensitive) and, for `year`, only the
    values of that year; metrics left without values are dropped. Records
    are always kept so company metadata survives the filter.
    """
    validated = parse_records(records)
    wanted_category = category.lower() if category else None

    filtered: List[DataRecord] = []
    for record in validated:
        kept: List[Metric] = []
        for metric in record.metrics:
            if wanted_category is not None and metric.category.lower() != wanted_category:
                continue
            if year is not None:
                values = tuple(v for v in metric.values if v.year == year)
                if not values:
                    continue
                metric = metric.model_copy(update={"values": values})
            kept.append(metric)
        filtered.append(record.model_copy(update={"metrics": tuple(kept)}))

    logger.debug(
        "records_filtered",
        year=year,
        category=category,
        metric_count=sum(len(r.metrics) for r in filtered),
    )
    return filtered

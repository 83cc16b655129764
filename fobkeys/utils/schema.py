"""Schema metadata stamping for machine-readable output."""

from dataclasses import dataclass
from datetime import UTC, datetime

from fobkeys import __version__


@dataclass(frozen=True, slots=True)
class SchemaStamp:
    """Schema metadata applied to JSON payloads."""

    schema_id: str
    schema_version: int
    producer: str
    produced_at: str


def build_schema_stamp(
    *,
    schema_id: str,
    schema_version: int,
    producer: str | None = None,
    produced_at: str | None = None,
) -> SchemaStamp:
    """Construct a :class:`SchemaStamp` for reuse across writers."""

    default_producer = producer or f"fobkeys-{__version__}"
    timestamp = produced_at or datetime.now(UTC).isoformat()
    return SchemaStamp(
        schema_id=schema_id,
        schema_version=schema_version,
        producer=default_producer,
        produced_at=timestamp,
    )

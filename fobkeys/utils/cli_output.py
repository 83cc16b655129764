"""CLI JSON output wrapper carrying schema metadata."""

from __future__ import annotations

import json
from typing import Any

from fobkeys.utils.schema import build_schema_stamp


def json_response(
    schema_id: str,
    schema_version: int,
    **data: Any,
) -> str:
    """Create schema-wrapped JSON response for CLI output.

    Args:
        schema_id: Identifier for the output type (e.g., "registration_key").
        schema_version: Integer version for backward compatibility.
        **data: Payload data to include in the response.

    Returns:
        JSON string with schema metadata and payload.

    Example:
        >>> json_response("verification", 1, name="Jane", valid=True)
        {
          "schema_id": "verification",
          "schema_version": 1,
          "producer": "fobkeys-0.1.0",
          "produced_at": "2026-10-17T10:30:00+00:00",
          "name": "Jane",
          "valid": true
        }
    """
    stamp = build_schema_stamp(schema_id=schema_id, schema_version=schema_version)
    wrapped = {
        "schema_id": stamp.schema_id,
        "schema_version": stamp.schema_version,
        "producer": stamp.producer,
        "produced_at": stamp.produced_at,
        **data,
    }
    return json.dumps(wrapped, indent=2, default=str, ensure_ascii=False)

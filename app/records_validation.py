"""Write-path validation of record payloads against entity schemas."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Sequence

from entity_registry import (
    NUMERIC_FIELD_TYPES,
    STRING_FIELD_TYPES,
    EntitySchema,
    FieldType,
    PipelineStage,
)

# Server-managed keys; accepted in payloads and never type-checked.
SYSTEM_FIELDS = frozenset({"id", "created_at", "updated_at"})


def _is_number(val: Any) -> bool:
    return isinstance(val, (int, float)) and not isinstance(val, bool)


def validate_record_payload(
    schema: EntitySchema,
    data: dict,
    for_create: bool,
    stages: Sequence[PipelineStage] | None = None,
) -> tuple[list[dict], dict]:
    errors: list[dict] = []
    if not isinstance(data, dict):
        return [
            {
                "code": "INVALID_PAYLOAD",
                "message": "Record data must be an object",
                "path": None,
                "detail": None,
            }
        ], {}

    def _add_error(code: str, message: str, path: str | None = None, detail: dict | None = None):
        errors.append({"code": code, "message": message, "path": path, "detail": detail})

    field_by_key = {fd.key: fd for fd in schema.fields}

    for key in data.keys():
        if key in SYSTEM_FIELDS:
            continue
        if key not in field_by_key:
            _add_error("UNKNOWN_FIELD", f"Unknown field: {key}", path=key)

    if for_create:
        for key, fd in field_by_key.items():
            if fd.required:
                val = data.get(key)
                if val is None or val == "" or val == []:
                    _add_error("REQUIRED_FIELD", f"Missing required field: {key}", path=key)
    else:
        # partial updates may not blank out required fields
        for key, val in data.items():
            fd = field_by_key.get(key)
            if fd and fd.required and (val is None or val == ""):
                _add_error("REQUIRED_FIELD", f"Required field cannot be cleared: {key}", path=key)

    for key, val in data.items():
        if key in SYSTEM_FIELDS:
            continue
        fd = field_by_key.get(key)
        if not fd or val is None:
            continue
        ftype = fd.type
        if ftype in STRING_FIELD_TYPES:
            if not isinstance(val, str):
                _add_error("TYPE_MISMATCH", f"{key} must be a string", path=key)
        elif ftype in NUMERIC_FIELD_TYPES:
            if not _is_number(val):
                _add_error("TYPE_MISMATCH", f"{key} must be a number", path=key)
            elif ftype == FieldType.PERCENTAGE and not 0 <= val <= 100:
                _add_error("OUT_OF_RANGE", f"{key} must be between 0 and 100", path=key, detail={"value": val})
        elif ftype == FieldType.BOOLEAN:
            if not isinstance(val, bool):
                _add_error("TYPE_MISMATCH", f"{key} must be a boolean", path=key)
        elif ftype == FieldType.SELECT:
            if key == "status" and stages:
                allowed = [s.value for s in stages]
            else:
                allowed = fd.option_values()
            if val not in allowed:
                _add_error("INVALID_OPTION", f"{key} must be one of {allowed}", path=key, detail={"allowed": allowed})
        elif ftype == FieldType.MULTISELECT:
            allowed = fd.option_values()
            if not isinstance(val, list):
                _add_error("TYPE_MISMATCH", f"{key} must be a list", path=key)
            else:
                bad = [item for item in val if item not in allowed]
                if bad:
                    _add_error("INVALID_OPTION", f"{key} has values outside {allowed}", path=key, detail={"invalid": bad})
        elif ftype == FieldType.DATE:
            if not isinstance(val, str):
                _add_error("TYPE_MISMATCH", f"{key} must be a date string", path=key)
            else:
                try:
                    date.fromisoformat(val)
                except ValueError:
                    _add_error("INVALID_DATE", f"{key} must be YYYY-MM-DD", path=key)
        elif ftype == FieldType.DATETIME:
            if not isinstance(val, str):
                _add_error("TYPE_MISMATCH", f"{key} must be a datetime string", path=key)
            else:
                try:
                    datetime.fromisoformat(val.replace("Z", "+00:00"))
                except ValueError:
                    _add_error("INVALID_DATETIME", f"{key} must be ISO8601", path=key)
        elif ftype == FieldType.JSON:
            if not isinstance(val, (dict, list)):
                _add_error("TYPE_MISMATCH", f"{key} must be an object or list", path=key)

    return errors, data

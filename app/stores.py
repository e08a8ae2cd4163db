"""In-memory record store, bucketed per tenant and entity type."""

from __future__ import annotations

import copy
import uuid
from datetime import datetime, timezone
from typing import Dict, Iterable, Mapping


def _now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class MemoryRecordStore:
    def __init__(self) -> None:
        self._records: Dict[str, Dict[str, Dict[str, dict]]] = {}

    def _bucket(self, tenant_id: str, entity_type: str) -> Dict[str, dict]:
        return self._records.setdefault(tenant_id, {}).setdefault(entity_type, {})

    def list(self, entity_type: str, tenant_id: str = "default") -> list[dict]:
        return [copy.deepcopy(r) for r in self._bucket(tenant_id, entity_type).values()]

    def get(self, entity_type: str, record_id: str, tenant_id: str = "default") -> dict | None:
        record = self._bucket(tenant_id, entity_type).get(record_id)
        return copy.deepcopy(record) if record else None

    def create(self, entity_type: str, data: dict, tenant_id: str = "default") -> dict:
        record_id = str(uuid.uuid4())
        record = copy.deepcopy(data)
        record["id"] = record_id
        record.setdefault("created_at", _now())
        self._bucket(tenant_id, entity_type)[record_id] = record
        return copy.deepcopy(record)

    def update(self, entity_type: str, record_id: str, data: dict, tenant_id: str = "default") -> dict:
        bucket = self._bucket(tenant_id, entity_type)
        if record_id not in bucket:
            raise KeyError(record_id)
        record = copy.deepcopy(bucket[record_id])
        record.update(copy.deepcopy(data))
        record["id"] = record_id
        record["updated_at"] = _now()
        bucket[record_id] = record
        return copy.deepcopy(record)

    def delete(self, entity_type: str, record_id: str, tenant_id: str = "default") -> None:
        bucket = self._bucket(tenant_id, entity_type)
        if record_id not in bucket:
            raise KeyError(record_id)
        del bucket[record_id]

    def count(self, entity_type: str, tenant_id: str = "default") -> int:
        return len(self._records.get(tenant_id, {}).get(entity_type, {}))

    def counts(self, tenant_id: str, entity_types: Iterable[str]) -> Dict[str, int]:
        return {entity_type: self.count(entity_type, tenant_id) for entity_type in entity_types}

    def seed(self, tenant_id: str, rows_by_type: Mapping[str, Iterable[dict]]) -> int:
        """Load fixture rows, keeping their ids when present. Returns rows written."""
        written = 0
        for entity_type, rows in rows_by_type.items():
            bucket = self._bucket(tenant_id, entity_type)
            for row in rows:
                record = copy.deepcopy(row)
                record_id = str(record.get("id") or uuid.uuid4())
                record["id"] = record_id
                bucket[record_id] = record
                written += 1
        return written

    def clear(self) -> None:
        self._records.clear()

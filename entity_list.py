"""Generic list view over any blueprint-enabled entity type."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence

from blueprint_resolver import Blueprint, SavedView
from entity_registry import EntitySchema, PipelineStage
from record_filters import matches_filters

ALL_STATUSES = "all"

DISPLAY_NAME_FIELDS = ("name", "company_name", "stage_name", "legal_name", "client_name")
SECONDARY_FIELDS = ("email", "phone", "whatsapp_number", "city", "category")

NO_MATCHES_TITLE = "No Matching Records"
NO_MATCHES_GUIDANCE = "Try adjusting your search or filters"


def unavailable_view(entity_type: Any, reason: str) -> dict:
    return {"available": False, "entity_type": entity_type, "reason": reason}


def search_rows(rows: Iterable[dict], term: str | None) -> List[dict]:
    """Keep rows where any string value contains ``term``, case-insensitively."""
    rows = [row for row in rows or [] if isinstance(row, dict)]
    if not isinstance(term, str) or not term:
        return rows
    needle = term.lower()
    return [
        row
        for row in rows
        if any(isinstance(value, str) and needle in value.lower() for value in row.values())
    ]


def filter_by_status(rows: Iterable[dict], status: str | None) -> List[dict]:
    rows = list(rows or [])
    if not status or status == ALL_STATUSES:
        return rows
    return [row for row in rows if row.get("status") == status]


def apply_saved_view(rows: Iterable[dict], view: SavedView | None) -> List[dict]:
    rows = list(rows or [])
    if view is None or not view.filters:
        return rows
    return [row for row in rows if matches_filters(row, view.filters)]


def sort_rows(rows: Iterable[dict], field: str | None, direction: str = "asc") -> List[dict]:
    """Stable sort by ``field``; rows missing the value always go last."""
    rows = list(rows or [])
    if not field:
        return rows
    present = [row for row in rows if row.get(field) is not None]
    missing = [row for row in rows if row.get(field) is None]

    def _key(row: dict) -> tuple:
        value = row.get(field)
        if isinstance(value, bool):
            return (0, int(value), "")
        if isinstance(value, (int, float)):
            return (0, value, "")
        return (1, 0, str(value).lower())

    present.sort(key=_key, reverse=str(direction).lower() == "desc")
    return present + missing


def stage_counts(stages: Sequence[PipelineStage], rows: Iterable[dict]) -> Dict[str, int]:
    counts = {stage.value: 0 for stage in stages}
    for row in rows or []:
        status = row.get("status")
        if isinstance(status, str) and status in counts:
            counts[status] += 1
    return counts


def toggle_stage_filter(current: str | None, stage_value: str) -> str:
    if current == stage_value:
        return ALL_STATUSES
    return stage_value


def status_options(stages: Sequence[PipelineStage], rows: Iterable[dict]) -> List[str]:
    if stages:
        return [stage.value for stage in stages]
    seen: List[str] = []
    for row in rows or []:
        status = row.get("status")
        if isinstance(status, str) and status and status not in seen:
            seen.append(status)
    return seen


def display_name(row: dict) -> str:
    for key in DISPLAY_NAME_FIELDS:
        value = row.get(key)
        if value:
            return str(value)
    return f"Record {row.get('id')}"


def secondary_info(row: dict) -> str:
    for key in SECONDARY_FIELDS:
        value = row.get(key)
        if value:
            return str(value)
    return ""


def _status_label(status: str) -> str:
    return status.replace("_", " ")


def list_item(row: dict, schema: EntitySchema, stages: Sequence[PipelineStage], columns: Sequence[str] | None = None) -> dict:
    status = row.get("status") or None
    stage = next((s for s in stages if s.value == status), None) if isinstance(status, str) else None
    return {
        "id": row.get("id"),
        "display_name": display_name(row),
        "secondary": secondary_info(row),
        "status": status,
        "status_label": stage.label if stage else (_status_label(status) if isinstance(status, str) else None),
        "status_color": stage.color if stage else schema.color,
        "columns": {col: row.get(col) for col in (columns or schema.list_columns)},
    }


def empty_state(schema: EntitySchema, total: int, shown: int) -> dict | None:
    if shown:
        return None
    if total == 0:
        return {
            "kind": "no_records",
            "title": f"No {schema.label_plural} Yet",
            "message": f"Get started by adding your first {schema.label.lower()}",
            "cta": f"Add {schema.label}",
        }
    return {
        "kind": "no_matches",
        "title": NO_MATCHES_TITLE,
        "message": NO_MATCHES_GUIDANCE,
        "cta": None,
    }


def build_list_view(
    blueprint: Blueprint,
    entity_type: str,
    rows: Iterable[dict] | None,
    search: str = "",
    status: str = ALL_STATUSES,
    saved_view: str | None = None,
    sort: str | None = None,
    direction: str | None = None,
) -> dict:
    """Apply saved view, search, status and sort to ``rows`` in that order.

    With no explicit ``sort`` the tenant's default sort for the entity type
    applies; columns come from the tenant list defaults, else the schema.
    """
    schema = blueprint.get_entity_schema(entity_type) if isinstance(entity_type, str) else None
    if schema is None:
        return unavailable_view(entity_type, "ENTITY_NOT_ENABLED")

    loading = rows is None
    all_rows = [row for row in rows or [] if isinstance(row, dict)]
    stages = blueprint.get_pipeline(entity_type)
    view = blueprint.get_saved_view(entity_type, saved_view) if saved_view else None
    list_view = blueprint.get_list_view(entity_type)
    columns = list(list_view.default_columns) if list_view and list_view.default_columns else list(schema.list_columns)
    if not sort and list_view and list_view.default_sort:
        sort, default_direction = list_view.default_sort
        direction = direction or default_direction
    direction = direction or "asc"

    narrowed = apply_saved_view(all_rows, view)
    narrowed = search_rows(narrowed, search)
    narrowed = filter_by_status(narrowed, status)
    narrowed = sort_rows(narrowed, sort, direction)

    return {
        "available": True,
        "entity_type": entity_type,
        "label": schema.label,
        "label_plural": schema.label_plural,
        "icon": schema.icon,
        "color": schema.color,
        "business_name": blueprint.business_name,
        "loading": loading,
        "search": search or "",
        "status": status or ALL_STATUSES,
        "saved_view": view.name if view else None,
        "saved_views": [v.name for v in blueprint.saved_views.get(entity_type, ())],
        "columns": columns,
        "sort": {"field": sort, "direction": direction} if sort else None,
        "filters": [
            {"field": f.field, "label": f.label, "type": f.type} for f in (list_view.filters if list_view else ())
        ],
        "status_options": status_options(stages, all_rows),
        "pipeline": (
            [
                {"value": s.value, "label": s.label, "color": s.color, "count": count}
                for s, count in zip(stages, stage_counts(stages, narrowed).values())
            ]
            if stages and blueprint.features.show_pipeline
            else None
        ),
        "total": len(all_rows),
        "count": len(narrowed),
        "items": [list_item(row, schema, stages, columns) for row in narrowed],
        "empty_state": empty_state(schema, len(all_rows), len(narrowed)),
    }

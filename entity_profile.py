"""Generic profile view for a single record of any enabled entity type."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from blueprint_resolver import Blueprint, FeatureFlags
from entity_list import display_name, unavailable_view
from entity_registry import EntitySchema, PipelineStage, humanize_key, stage_index

STAGE_COMPLETED = "completed"
STAGE_ACTIVE = "active"
STAGE_UPCOMING = "upcoming"

# Used when the tenant declares no tabs for an entity type.
# (tab key, label, icon)
_DEFAULT_TABS = (
    ("media", "Media Vault", "Image"),
    ("whatsapp", "WhatsApp", "MessageCircle"),
    ("bookings", "Bookings", "Calendar"),
    ("commissions", "Commissions", "DollarSign"),
    ("notes", "Notes", "FileText"),
    ("tasks", "Tasks", "ClipboardList"),
)

# Tabs hidden unless the feature is on; other keys are always shown.
_TAB_FEATURES = {
    "media": "show_media_vault",
    "whatsapp": "show_whatsapp",
    "bookings": "show_bookings",
    "commissions": "show_commissions",
}


def _display_value(value: Any) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    text = str(value)
    return text if text else "-"


def overview_rows(row: dict, schema: EntitySchema | None = None) -> List[Dict[str, Any]]:
    """Scalar fields of ``row`` in record order, minus ``id`` and nested values."""
    if not isinstance(row, dict):
        return []
    out: List[Dict[str, Any]] = []
    for key, value in row.items():
        if key == "id" or value is None or isinstance(value, (dict, list, tuple)):
            continue
        fd = schema.field(key) if schema else None
        out.append(
            {
                "key": key,
                "label": fd.label if fd else humanize_key(key),
                "value": value,
                "display": _display_value(value),
            }
        )
    return out


def pipeline_progress(stages: Sequence[PipelineStage], status: Any) -> List[Dict[str, Any]] | None:
    if not stages:
        return None
    current = stage_index(stages, status)
    if current is None:
        return None
    out = []
    for idx, stage in enumerate(stages):
        if idx < current:
            state = STAGE_COMPLETED
        elif idx == current:
            state = STAGE_ACTIVE
        else:
            state = STAGE_UPCOMING
        out.append({"value": stage.value, "label": stage.label, "color": stage.color, "state": state})
    return out


def profile_tabs(blueprint: Blueprint, entity_type: str, features: FeatureFlags | None = None) -> List[Dict[str, str]]:
    """Tabs for a record profile, tenant-declared where present.

    ``overview`` always leads, followed by ``pipeline`` when the type has
    stages and the pipeline feature is on. Feature-backed tabs drop out
    when their flag is off.
    """
    features = features or blueprint.features
    declared = [(t.key, t.label, t.icon) for t in blueprint.get_profile_tabs(entity_type)]
    candidates = declared or list(_DEFAULT_TABS)
    tabs = [{"key": "overview", "label": "Overview", "icon": next((i for k, _, i in declared if k == "overview"), "User")}]
    if blueprint.get_pipeline(entity_type) and features.show_pipeline:
        tabs.append({"key": "pipeline", "label": "Pipeline", "icon": "GitBranch"})
    for key, label, icon in candidates:
        if key in ("overview", "pipeline"):
            continue
        flag = _TAB_FEATURES.get(key)
        if flag is None or getattr(features, flag, False):
            tabs.append({"key": key, "label": label, "icon": icon})
    return tabs


def contact_card(row: dict) -> Dict[str, str]:
    if not isinstance(row, dict):
        return {}
    card: Dict[str, str] = {}
    for key in ("phone", "whatsapp_number", "email"):
        if row.get(key):
            card[key] = str(row[key])
    location = ", ".join(str(row[k]) for k in ("city", "state") if row.get(k))
    if row.get("address"):
        card["address"] = str(row["address"])
    if location:
        card["location"] = location
    return card


def build_profile_view(
    blueprint: Blueprint,
    entity_type: str,
    row: dict | None,
    features: FeatureFlags | None = None,
) -> dict:
    schema = blueprint.get_entity_schema(entity_type) if isinstance(entity_type, str) else None
    if schema is None:
        return unavailable_view(entity_type, "ENTITY_NOT_ENABLED")
    if not isinstance(row, dict):
        return unavailable_view(entity_type, "RECORD_NOT_FOUND")

    features = features or blueprint.features
    stages = blueprint.get_pipeline(entity_type)
    status = row.get("status")
    current = next((s for s in stages if s.value == status), None)
    progress = pipeline_progress(stages, status)

    return {
        "available": True,
        "entity_type": entity_type,
        "id": row.get("id"),
        "display_name": display_name(row),
        "label": schema.label,
        "label_plural": schema.label_plural,
        "icon": schema.icon,
        "color": schema.color,
        "status": status,
        "status_badge": {"label": current.label, "color": current.color} if current else None,
        "pipeline": progress,
        "overview": overview_rows(row, schema),
        "tabs": profile_tabs(blueprint, entity_type, features),
        "contact": contact_card(row),
    }

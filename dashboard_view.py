"""Tenant dashboard: KPI tiles and one card per enabled entity type."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

from blueprint_resolver import Blueprint
from tenant_router import route


def entity_link(blueprint: Blueprint, entity_type: str) -> str:
    return f"/crm/{blueprint.tenant_slug}/{entity_type}"


def _count(counts: Mapping[str, Any] | None, key: str) -> int:
    if not counts:
        return 0
    value = counts.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def kpi_tiles(
    blueprint: Blueprint,
    counts: Mapping[str, int] | None,
    filtered_counts: Mapping[str, int] | None = None,
) -> List[Dict[str, Any]]:
    """One tile per KPI whose entity type is enabled.

    ``counts`` is keyed by entity type. A KPI with a filter uses
    ``filtered_counts[kpi.key]`` when the caller supplied one, else the plain
    entity count.
    """
    tiles = []
    for kpi in blueprint.kpi_config:
        if not blueprint.is_enabled(kpi.entity_type):
            continue
        if kpi.filter and filtered_counts and kpi.key in filtered_counts:
            value = _count(filtered_counts, kpi.key)
        else:
            value = _count(counts, kpi.entity_type)
        tiles.append(
            {
                "key": kpi.key,
                "label": kpi.label,
                "icon": kpi.icon,
                "entity_type": kpi.entity_type,
                "value": value,
                "variant": kpi.variant,
                "link": entity_link(blueprint, kpi.entity_type) if kpi.clickable else None,
            }
        )
    return tiles


def entity_cards(blueprint: Blueprint, counts: Mapping[str, int] | None) -> List[Dict[str, Any]]:
    cards = []
    for entity_type in blueprint.enabled_entity_types:
        schema = blueprint.get_entity_schema(entity_type)
        if schema is None:
            continue
        cards.append(
            {
                "entity_type": entity_type,
                "label": schema.label_plural,
                "icon": schema.icon,
                "color": schema.color,
                "count": _count(counts, entity_type),
                "link": entity_link(blueprint, entity_type),
            }
        )
    return cards


def build_dashboard_view(
    blueprint: Blueprint,
    counts: Mapping[str, int] | None,
    filtered_counts: Mapping[str, int] | None = None,
) -> dict:
    return {
        "tenant_slug": blueprint.tenant_slug,
        "business_name": blueprint.business_name,
        "category": blueprint.category,
        "variant": route(blueprint.tenant_slug).value,
        "is_fallback": blueprint.is_fallback,
        "entity_type_count": len(blueprint.enabled_entity_types),
        "kpis": kpi_tiles(blueprint, counts, filtered_counts),
        "entities": entity_cards(blueprint, counts),
        "features": blueprint.features.to_dict(),
    }

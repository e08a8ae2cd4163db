"""Tenant slug -> top-level experience classification."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ExperienceVariant(str, Enum):
    LEGACY = "legacy"
    PARTNER_DASHBOARD = "partner_dashboard"
    GENERIC_BLUEPRINT = "generic_blueprint"


# Brands still served by the fixed store-distribution layout.
LEGACY_TENANT_SLUGS = frozenset({"gasmask", "hotmama", "grabba", "scalati"})

PARTNER_TENANT_SLUGS = frozenset({"toptier", "toptier-experience"})

# Checked in order; first match wins.
ROUTE_RULES = (
    (LEGACY_TENANT_SLUGS, ExperienceVariant.LEGACY),
    (PARTNER_TENANT_SLUGS, ExperienceVariant.PARTNER_DASHBOARD),
)


def normalize_slug(value: Any) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip().lower()


def route(tenant_slug: str) -> ExperienceVariant:
    slug = normalize_slug(tenant_slug)
    for members, variant in ROUTE_RULES:
        if slug in members:
            return variant
    return ExperienceVariant.GENERIC_BLUEPRINT


def overlapping_slugs() -> frozenset:
    return LEGACY_TENANT_SLUGS & PARTNER_TENANT_SLUGS

"""Tenant blueprint resolution: slug -> enabled entities, pipelines, features, KPIs."""

from __future__ import annotations

from dataclasses import dataclass, field, fields as dc_fields
from typing import Any, Dict, Mapping, Tuple

from dynasty.blueprint_hash import blueprint_hash
from entity_registry import (
    ENTITY_SCHEMAS,
    PIPELINES,
    EntitySchema,
    PipelineStage,
    pipeline_to_list,
    schema_to_dict,
)
from tenant_router import normalize_slug


@dataclass(frozen=True)
class FeatureFlags:
    show_stores: bool = False
    show_inventory: bool = False
    show_routes: bool = False
    show_bookings: bool = False
    show_commissions: bool = False
    show_calendar: bool = False
    show_media_vault: bool = False
    show_whatsapp: bool = False
    show_task_templates: bool = False
    show_pipeline: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in dc_fields(self)}


@dataclass(frozen=True)
class KPIConfig:
    key: str
    label: str
    icon: str
    entity_type: str
    aggregation: str = "count"
    filter: Mapping[str, Any] | None = None
    variant: str = "default"
    clickable: bool = True


@dataclass(frozen=True)
class SavedView:
    name: str
    filters: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ProfileTab:
    key: str
    label: str
    icon: str = "FileText"


@dataclass(frozen=True)
class ListFilter:
    field: str
    label: str
    type: str = "select"


@dataclass(frozen=True)
class ListView:
    """Per-tenant list defaults for one entity type."""

    default_columns: Tuple[str, ...] = ()
    default_sort: Tuple[str, str] | None = None
    filters: Tuple[ListFilter, ...] = ()


@dataclass(frozen=True)
class TenantBlueprint:
    business_id: str
    name: str
    category: str
    enabled_entity_types: Tuple[str, ...]
    features: FeatureFlags
    kpi_config: Tuple[KPIConfig, ...] = ()
    saved_views: Mapping[str, Tuple[SavedView, ...]] = field(default_factory=dict)
    profile_tabs: Mapping[str, Tuple[ProfileTab, ...]] = field(default_factory=dict)
    list_views: Mapping[str, ListView] = field(default_factory=dict)


@dataclass(frozen=True)
class Blueprint:
    tenant_slug: str
    business_id: str
    business_name: str
    category: str
    enabled_entity_types: Tuple[str, ...]
    entity_schemas: Mapping[str, EntitySchema]
    pipelines: Mapping[str, Tuple[PipelineStage, ...]]
    features: FeatureFlags
    kpi_config: Tuple[KPIConfig, ...]
    saved_views: Mapping[str, Tuple[SavedView, ...]]
    profile_tabs: Mapping[str, Tuple[ProfileTab, ...]] = field(default_factory=dict)
    list_views: Mapping[str, ListView] = field(default_factory=dict)
    is_fallback: bool = False

    def is_enabled(self, entity_type: str) -> bool:
        return entity_type in self.entity_schemas

    def get_entity_schema(self, entity_type: str) -> EntitySchema | None:
        return self.entity_schemas.get(entity_type)

    def get_pipeline(self, entity_type: str) -> Tuple[PipelineStage, ...]:
        return self.pipelines.get(entity_type, ())

    def get_saved_view(self, entity_type: str, name: str) -> SavedView | None:
        for view in self.saved_views.get(entity_type, ()):
            if view.name == name:
                return view
        return None

    def get_profile_tabs(self, entity_type: str) -> Tuple[ProfileTab, ...]:
        return self.profile_tabs.get(entity_type, ())

    def get_list_view(self, entity_type: str) -> ListView | None:
        return self.list_views.get(entity_type)


# =============================================================================
# Tenant blueprints
# =============================================================================

TENANT_BLUEPRINTS: Mapping[str, TenantBlueprint] = {
    "toptier-experience": TenantBlueprint(
        business_id="toptier",
        name="TopTier Experience",
        category="partner_promo",
        enabled_entity_types=("partner", "customer", "influencer", "booking", "promo_campaign", "task", "note"),
        features=FeatureFlags(
            show_bookings=True,
            show_commissions=True,
            show_calendar=True,
            show_pipeline=True,
        ),
        kpi_config=(
            KPIConfig("partners", "Partners", "Users", "partner", variant="cyan"),
            KPIConfig("active_promos", "Active Promos", "Megaphone", "promo_campaign", filter={"status": "active"}, variant="amber"),
            KPIConfig("bookings", "Active Bookings", "Calendar", "booking", filter={"status": ["confirmed", "in_progress"]}, variant="green"),
            KPIConfig("customers", "Customers", "UserCheck", "customer"),
            KPIConfig("influencers", "Influencers", "Star", "influencer"),
        ),
        saved_views={
            "partner": (
                SavedView("Partner Directory"),
                SavedView("Active Contracts", {"contract_status": "active"}),
                SavedView("Pending Contracts", {"contract_status": "pending"}),
                SavedView("Expired Contracts", {"contract_status": "expired"}),
                SavedView("Yacht Partners", {"partner_category": "yachts"}),
                SavedView("Helicopter Partners", {"partner_category": "helicopter_promo"}),
            ),
            "customer": (
                SavedView("All Customers"),
                SavedView("VIP Customers", {"status": "vip"}),
                SavedView("Active Leads", {"status": "lead"}),
            ),
            "booking": (
                SavedView("All Bookings"),
                SavedView("Upcoming Events", {"status": ["confirmed", "deposit_paid"]}),
                SavedView("In Progress", {"status": "in_progress"}),
                SavedView("Completed", {"status": "completed"}),
            ),
            "promo_campaign": (
                SavedView("All Campaigns"),
                SavedView("Active Promos", {"status": "active"}),
                SavedView("Draft Promos", {"status": "draft"}),
            ),
        },
        profile_tabs={
            "partner": (
                ProfileTab("overview", "Overview", "User"),
                ProfileTab("bookings", "Deals / Bookings", "Calendar"),
                ProfileTab("campaigns", "Campaigns / Promos", "Megaphone"),
                ProfileTab("commissions", "Commissions", "DollarSign"),
                ProfileTab("interactions", "Interactions", "MessageSquare"),
                ProfileTab("notes", "Notes", "FileText"),
                ProfileTab("assets", "Assets (Contracts, Media)", "Folder"),
            ),
            "customer": (
                ProfileTab("overview", "Overview", "User"),
                ProfileTab("bookings", "Bookings", "Calendar"),
                ProfileTab("interactions", "Interactions", "MessageSquare"),
                ProfileTab("notes", "Notes", "FileText"),
            ),
            "influencer": (
                ProfileTab("overview", "Overview", "User"),
                ProfileTab("commissions", "Commissions", "DollarSign"),
                ProfileTab("referrals", "Referrals", "Users"),
                ProfileTab("campaigns", "Campaigns", "Megaphone"),
                ProfileTab("notes", "Notes", "FileText"),
            ),
            "booking": (
                ProfileTab("overview", "Overview", "Calendar"),
                ProfileTab("partners", "Partners", "Building2"),
                ProfileTab("payments", "Payments", "DollarSign"),
                ProfileTab("notes", "Notes", "FileText"),
            ),
            "promo_campaign": (
                ProfileTab("overview", "Overview", "Megaphone"),
                ProfileTab("partners", "Partners", "Building2"),
                ProfileTab("influencers", "Influencers", "Star"),
                ProfileTab("performance", "Performance", "TrendingUp"),
            ),
        },
        list_views={
            "partner": ListView(
                default_columns=("company_name", "partner_category", "state", "city", "commission_rate", "contract_status"),
                default_sort=("company_name", "asc"),
                filters=(
                    ListFilter("partner_category", "Partner Category"),
                    ListFilter("state", "State"),
                    ListFilter("city", "City", "text"),
                    ListFilter("contract_status", "Contract Status"),
                ),
            ),
            "customer": ListView(
                default_columns=("name", "phone", "interest_categories", "status"),
                default_sort=("created_at", "desc"),
                filters=(
                    ListFilter("status", "Status"),
                    ListFilter("interest_categories", "Interest", "multiselect"),
                ),
            ),
            "influencer": ListView(
                default_columns=("name", "platform", "handle", "audience_size", "commission_rate"),
                default_sort=("audience_size", "desc"),
                filters=(ListFilter("platform", "Platform"),),
            ),
            "booking": ListView(
                default_columns=("customer_name", "event_date", "partner_categories", "total_amount", "status"),
                default_sort=("event_date", "asc"),
                filters=(
                    ListFilter("status", "Status"),
                    ListFilter("partner_categories", "Categories", "multiselect"),
                ),
            ),
            "promo_campaign": ListView(
                default_columns=("name", "promo_category", "start_date", "end_date", "status"),
                default_sort=("start_date", "desc"),
                filters=(
                    ListFilter("promo_category", "Category"),
                    ListFilter("status", "Status"),
                ),
            ),
        },
    ),
    "usa-funding": TenantBlueprint(
        business_id="funding",
        name="USA Funding",
        category="funding",
        enabled_entity_types=("client", "funding_application", "task", "note"),
        features=FeatureFlags(show_task_templates=True, show_pipeline=True),
        kpi_config=(
            KPIConfig("clients", "Clients", "Users", "client", variant="cyan"),
            KPIConfig("applications", "Applications", "FileText", "funding_application", variant="purple"),
            KPIConfig("funded", "Funded", "Banknote", "funding_application", filter={"status": "funded"}, variant="green"),
            KPIConfig("open_tasks", "Open Tasks", "ListTodo", "task", filter={"status": "pending"}, variant="amber"),
        ),
        saved_views={
            "client": (
                SavedView("All Clients"),
                SavedView("Docs Pending", {"status": "docs_pending"}),
            ),
        },
        profile_tabs={
            "client": (
                ProfileTab("overview", "Overview", "User"),
                ProfileTab("tasks", "Checklist", "ClipboardList"),
                ProfileTab("documents", "Documents", "FileText"),
                ProfileTab("notes", "Notes", "MessageSquare"),
                ProfileTab("interactions", "Interactions", "Phone"),
                ProfileTab("applications", "Applications", "Folder"),
            ),
        },
        list_views={
            "client": ListView(
                default_columns=("legal_name", "business_name", "phone", "status", "next_follow_up_date"),
                default_sort=("next_follow_up_date", "asc"),
                filters=(ListFilter("status", "Status"),),
            ),
        },
    ),
    "unforgettable-times": TenantBlueprint(
        business_id="unforgettable",
        name="Unforgettable Times",
        category="events",
        enabled_entity_types=("vendor", "staff", "customer", "event_booking", "task", "note"),
        features=FeatureFlags(
            show_bookings=True,
            show_calendar=True,
            show_task_templates=True,
            show_pipeline=True,
        ),
        kpi_config=(
            KPIConfig("vendors", "Vendors", "Building", "vendor", variant="purple"),
            KPIConfig("staff", "Staff", "UserCog", "staff", variant="amber"),
            KPIConfig("events", "Event Bookings", "Calendar", "event_booking", variant="green"),
        ),
        saved_views={
            "vendor": (
                SavedView("All Vendors"),
                SavedView("Event Halls", {"category": "event_hall"}),
            ),
        },
        profile_tabs={
            "vendor": (
                ProfileTab("overview", "Overview", "Building"),
                ProfileTab("events", "Events", "Calendar"),
                ProfileTab("notes", "Notes", "FileText"),
                ProfileTab("contracts", "Contracts", "File"),
            ),
            "event_booking": (
                ProfileTab("overview", "Overview", "Calendar"),
                ProfileTab("vendors", "Vendors", "Building"),
                ProfileTab("staff", "Staff", "Users"),
                ProfileTab("checklist", "Checklist", "ClipboardList"),
                ProfileTab("notes", "Notes", "FileText"),
            ),
        },
        list_views={
            "vendor": ListView(
                default_columns=("name", "category", "city", "availability", "rating"),
                default_sort=("name", "asc"),
                filters=(
                    ListFilter("category", "Category"),
                    ListFilter("state", "State"),
                ),
            ),
            "event_booking": ListView(
                default_columns=("client_name", "event_type", "event_date", "guest_count", "status"),
                default_sort=("event_date", "asc"),
                filters=(
                    ListFilter("status", "Status"),
                    ListFilter("event_type", "Event Type"),
                ),
            ),
        },
    ),
    "the-playboxxx": TenantBlueprint(
        business_id="playboxxx",
        name="The PlayBoxxx",
        category="events",
        enabled_entity_types=("model", "collab", "task", "note"),
        features=FeatureFlags(
            show_media_vault=True,
            show_whatsapp=True,
            show_pipeline=True,
        ),
        kpi_config=(
            KPIConfig("models", "Models", "Star", "model", variant="purple"),
            KPIConfig("active_models", "Active Models", "Star", "model", filter={"status": ["active", "featured"]}, variant="green"),
            KPIConfig("collabs", "Collaborations", "Briefcase", "collab", variant="cyan"),
        ),
        profile_tabs={
            "model": (
                ProfileTab("overview", "Overview", "User"),
                ProfileTab("whatsapp", "WhatsApp", "MessageCircle"),
                ProfileTab("media", "Media Vault", "Image"),
                ProfileTab("contracts", "Contracts", "FileText"),
                ProfileTab("collabs", "Collabs", "Briefcase"),
                ProfileTab("notes", "Notes", "MessageSquare"),
            ),
        },
        list_views={
            "model": ListView(
                default_columns=("stage_name", "country", "city", "status", "verification_status"),
                default_sort=("created_at", "desc"),
                filters=(
                    ListFilter("status", "Status"),
                    ListFilter("verification_status", "Verification"),
                    ListFilter("country", "Country", "text"),
                ),
            ),
            "collab": ListView(
                default_columns=("model_name", "type", "start_date", "status", "revenue"),
                default_sort=("start_date", "desc"),
                filters=(
                    ListFilter("status", "Status"),
                    ListFilter("type", "Type"),
                ),
            ),
        },
    ),
}

TENANT_ALIASES: Mapping[str, str] = {
    "toptier": "toptier-experience",
    "funding": "usa-funding",
    "unforgettable": "unforgettable-times",
    "playboxxx": "the-playboxxx",
}


# =============================================================================
# Category blueprints (used when a tenant has no dedicated blueprint)
# =============================================================================

DEFAULT_CATEGORY = "general"

CATEGORY_BLUEPRINTS: Mapping[str, TenantBlueprint] = {
    "general": TenantBlueprint(
        business_id="default",
        name="General CRM",
        category="general",
        enabled_entity_types=("contact", "store", "deal", "task", "note"),
        features=FeatureFlags(show_stores=True, show_calendar=True, show_pipeline=True),
        kpi_config=(
            KPIConfig("contacts", "Contacts", "Users", "contact", variant="cyan"),
            KPIConfig("stores", "Stores", "Store", "store", variant="green"),
            KPIConfig("open_deals", "Open Deals", "Handshake", "deal", filter={"status": ["lead", "proposal", "negotiation"]}, variant="amber"),
        ),
        saved_views={
            "contact": (
                SavedView("All Contacts"),
                SavedView("Qualified", {"status": "qualified"}),
            ),
        },
    ),
    "store_distribution": TenantBlueprint(
        business_id="store_distribution",
        name="Store Distribution",
        category="store_distribution",
        enabled_entity_types=("store", "wholesaler", "contact", "campaign", "task", "note"),
        features=FeatureFlags(
            show_stores=True,
            show_inventory=True,
            show_routes=True,
            show_pipeline=True,
        ),
        kpi_config=(
            KPIConfig("stores", "Stores", "Store", "store", variant="green"),
            KPIConfig("active_stores", "Active Stores", "Store", "store", filter={"status": "active"}, variant="cyan"),
            KPIConfig("wholesalers", "Wholesalers", "Warehouse", "wholesaler", variant="purple"),
            KPIConfig("campaigns", "Campaigns", "Megaphone", "campaign", variant="amber"),
        ),
    ),
    "partner_promo": TenantBlueprint(
        business_id="partner_promo",
        name="Partner Promotions",
        category="partner_promo",
        enabled_entity_types=("partner", "customer", "influencer", "booking", "promo_campaign", "task", "note"),
        features=FeatureFlags(show_bookings=True, show_commissions=True, show_calendar=True, show_pipeline=True),
        kpi_config=(
            KPIConfig("partners", "Partners", "Users", "partner", variant="cyan"),
            KPIConfig("bookings", "Bookings", "Calendar", "booking", variant="green"),
        ),
    ),
    "funding": TenantBlueprint(
        business_id="funding_category",
        name="Funding & Finance",
        category="funding",
        enabled_entity_types=("client", "funding_application", "task", "note"),
        features=FeatureFlags(show_commissions=True, show_pipeline=True),
        kpi_config=(
            KPIConfig("clients", "Clients", "Users", "client", variant="cyan"),
            KPIConfig("applications", "Applications", "FileText", "funding_application", variant="purple"),
        ),
    ),
    "acquisition": TenantBlueprint(
        business_id="acquisition",
        name="Acquisition",
        category="acquisition",
        enabled_entity_types=("contact", "deal", "task", "note"),
        features=FeatureFlags(show_pipeline=True),
        kpi_config=(
            KPIConfig("leads", "Leads", "Target", "contact", variant="cyan"),
            KPIConfig("deals", "Deals", "Handshake", "deal", variant="purple"),
        ),
    ),
    "events": TenantBlueprint(
        business_id="events",
        name="Events & Hospitality",
        category="events",
        enabled_entity_types=("vendor", "staff", "customer", "event_booking", "task", "note"),
        features=FeatureFlags(show_bookings=True, show_calendar=True, show_pipeline=True),
        kpi_config=(
            KPIConfig("events", "Event Bookings", "Calendar", "event_booking", variant="green"),
            KPIConfig("vendors", "Vendors", "Building", "vendor", variant="purple"),
        ),
    ),
    "staffing": TenantBlueprint(
        business_id="staffing",
        name="Staffing & HR",
        category="staffing",
        enabled_entity_types=("employee", "contact", "task", "note"),
        features=FeatureFlags(show_calendar=True, show_task_templates=True, show_pipeline=True),
        kpi_config=(
            KPIConfig("employees", "Employees", "UserCog", "employee", variant="cyan"),
            KPIConfig("active_employees", "Active", "UserCheck", "employee", filter={"status": "active"}, variant="green"),
        ),
    ),
}


# (substring, excluded substring, category), first match wins.
_SLUG_RULES = (
    ("toptier", "distribution", "partner_promo"),
    ("unforgettable", None, "events"),
    ("playbox", None, "events"),
)

_INDUSTRY_RULES = (
    ("tobacco", "store_distribution"),
    ("distribution", "store_distribution"),
    ("events", "events"),
    ("hospitality", "events"),
    ("funding", "funding"),
    ("credit", "funding"),
    ("real_estate", "acquisition"),
    ("acquisition", "acquisition"),
    ("staffing", "staffing"),
    ("recruit", "staffing"),
)

_BUSINESS_TYPE_RULES: Mapping[str, str] = {
    "consumer_goods": "store_distribution",
    "services": "partner_promo",
    "platform": "partner_promo",
    "events": "events",
    "financial_services": "funding",
    "acquisition": "acquisition",
    "staffing": "staffing",
}


def _category_key(value: str) -> str:
    return normalize_slug(value).replace(" ", "_").replace("-", "_")


def infer_category(slug: str | None, business_type: str | None = None, industry: str | None = None) -> str:
    """Map a tenant's slug, industry and business type to a category key."""
    if isinstance(slug, str) and slug.strip():
        key = _category_key(slug)
        for needle, excluded, category in _SLUG_RULES:
            if needle in key and not (excluded and excluded in key):
                return category
        if key in CATEGORY_BLUEPRINTS:
            return key

    if isinstance(industry, str) and industry.strip():
        ind = _category_key(industry)
        for needle, category in _INDUSTRY_RULES:
            if needle in ind:
                return category

    if isinstance(business_type, str) and business_type.strip():
        category = _BUSINESS_TYPE_RULES.get(_category_key(business_type))
        if category:
            return category

    return DEFAULT_CATEGORY


def canonical_tenant_slug(slug: str) -> str:
    return TENANT_ALIASES.get(slug, slug)


def _materialize(slug: str, row: TenantBlueprint, is_fallback: bool) -> Blueprint:
    enabled = tuple(key for key in row.enabled_entity_types if key in ENTITY_SCHEMAS)
    schemas = {key: ENTITY_SCHEMAS[key] for key in enabled}
    pipelines = {key: PIPELINES[key] for key in enabled if key in PIPELINES}
    kpis = tuple(kpi for kpi in row.kpi_config if kpi.entity_type in schemas)
    saved_views = {key: views for key, views in row.saved_views.items() if key in schemas}
    profile_tabs = {key: tabs for key, tabs in row.profile_tabs.items() if key in schemas}
    list_views = {key: lv for key, lv in row.list_views.items() if key in schemas}
    return Blueprint(
        tenant_slug=slug,
        business_id=row.business_id,
        business_name=row.name,
        category=row.category,
        enabled_entity_types=enabled,
        entity_schemas=schemas,
        pipelines=pipelines,
        features=row.features,
        kpi_config=kpis,
        saved_views=saved_views,
        profile_tabs=profile_tabs,
        list_views=list_views,
        is_fallback=is_fallback,
    )


def resolve(tenant_slug: str, business_type: str | None = None, industry: str | None = None) -> Blueprint:
    """Resolve a tenant slug to its blueprint.

    Aliases map to the canonical tenant slug. Dedicated tenant blueprints
    win, then the inferred category, then the general blueprint. Never raises
    for string input; unmapped slugs get the general blueprint with
    ``is_fallback`` set.
    """
    slug = canonical_tenant_slug(normalize_slug(tenant_slug))
    row = TENANT_BLUEPRINTS.get(slug)
    if row is not None:
        return _materialize(slug, row, is_fallback=False)
    category = infer_category(slug, business_type=business_type, industry=industry)
    row = CATEGORY_BLUEPRINTS.get(category) or CATEGORY_BLUEPRINTS[DEFAULT_CATEGORY]
    return _materialize(slug, row, is_fallback=category == DEFAULT_CATEGORY)


def kpi_to_dict(kpi: KPIConfig) -> dict:
    return {
        "key": kpi.key,
        "label": kpi.label,
        "icon": kpi.icon,
        "entity_type": kpi.entity_type,
        "aggregation": kpi.aggregation,
        "filter": dict(kpi.filter) if kpi.filter else None,
        "variant": kpi.variant,
        "clickable": kpi.clickable,
    }


def list_view_to_dict(list_view: ListView) -> dict:
    sort = list_view.default_sort
    return {
        "default_columns": list(list_view.default_columns),
        "default_sort": {"field": sort[0], "direction": sort[1]} if sort else None,
        "filters": [{"field": f.field, "label": f.label, "type": f.type} for f in list_view.filters],
    }


def blueprint_to_dict(blueprint: Blueprint) -> dict:
    payload = {
        "tenant_slug": blueprint.tenant_slug,
        "business_id": blueprint.business_id,
        "business_name": blueprint.business_name,
        "category": blueprint.category,
        "is_fallback": blueprint.is_fallback,
        "enabled_entity_types": list(blueprint.enabled_entity_types),
        "entity_schemas": {key: schema_to_dict(schema) for key, schema in blueprint.entity_schemas.items()},
        "pipelines": {key: pipeline_to_list(stages) for key, stages in blueprint.pipelines.items()},
        "features": blueprint.features.to_dict(),
        "kpi_config": [kpi_to_dict(kpi) for kpi in blueprint.kpi_config],
        "saved_views": {
            key: [{"name": v.name, "filters": dict(v.filters)} for v in views]
            for key, views in blueprint.saved_views.items()
        },
        "profile_tabs": {
            key: [{"key": t.key, "label": t.label, "icon": t.icon} for t in tabs]
            for key, tabs in blueprint.profile_tabs.items()
        },
        "list_views": {key: list_view_to_dict(lv) for key, lv in blueprint.list_views.items()},
    }
    payload["fingerprint"] = blueprint_hash(payload)
    return payload

import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from blueprint_resolver import (
    CATEGORY_BLUEPRINTS,
    TENANT_ALIASES,
    TENANT_BLUEPRINTS,
    blueprint_to_dict,
    infer_category,
    resolve,
)
from entity_registry import ENTITY_SCHEMAS


SAMPLE_SLUGS = (
    "toptier",
    "toptier-experience",
    "usa-funding",
    "funding",
    "unforgettable-times",
    "the-playboxxx",
    "gasmask",
    "acme-wholesale",
    "  ACME-Wholesale ",
    "",
    "   ",
    "events",
    "zzz-unknown-brand",
)


class TestBlueprintResolver(unittest.TestCase):
    def test_resolve_never_empty(self) -> None:
        for slug in SAMPLE_SLUGS:
            bp = resolve(slug)
            self.assertTrue(bp.entity_schemas, repr(slug))
            self.assertTrue(bp.enabled_entity_types, repr(slug))

    def test_resolve_non_string_falls_back(self) -> None:
        bp = resolve(None)
        self.assertTrue(bp.is_fallback)
        self.assertTrue(bp.entity_schemas)

    def test_schemas_and_pipelines_limited_to_enabled(self) -> None:
        for slug in SAMPLE_SLUGS:
            bp = resolve(slug)
            enabled = set(bp.enabled_entity_types)
            self.assertEqual(set(bp.entity_schemas), enabled)
            self.assertTrue(set(bp.pipelines) <= enabled)
            for kpi in bp.kpi_config:
                self.assertIn(kpi.entity_type, enabled)

    def test_every_static_row_uses_known_entity_types(self) -> None:
        for row in list(TENANT_BLUEPRINTS.values()) + list(CATEGORY_BLUEPRINTS.values()):
            for key in row.enabled_entity_types:
                self.assertIn(key, ENTITY_SCHEMAS, f"{row.business_id}:{key}")

    def test_aliases_point_to_tenants(self) -> None:
        for alias, target in TENANT_ALIASES.items():
            self.assertIn(target, TENANT_BLUEPRINTS)
            self.assertEqual(resolve(alias).tenant_slug, target)

    def test_toptier_blueprint(self) -> None:
        bp = resolve("TopTier")
        self.assertFalse(bp.is_fallback)
        self.assertEqual(bp.business_name, "TopTier Experience")
        self.assertEqual(
            bp.enabled_entity_types,
            ("partner", "customer", "influencer", "booking", "promo_campaign", "task", "note"),
        )
        self.assertTrue(bp.features.show_commissions)
        self.assertFalse(bp.features.show_media_vault)
        self.assertIn("booking", bp.pipelines)
        self.assertNotIn("customer", bp.pipelines)
        self.assertEqual(bp.get_pipeline("store"), ())
        self.assertIsNone(bp.get_entity_schema("store"))
        self.assertTrue(bp.is_enabled("partner"))
        self.assertFalse(bp.is_enabled("store"))

    def test_saved_views(self) -> None:
        bp = resolve("toptier-experience")
        view = bp.get_saved_view("customer", "VIP Customers")
        self.assertEqual(dict(view.filters), {"status": "vip"})
        self.assertIsNone(bp.get_saved_view("customer", "Nope"))

    def test_unmapped_slug_gets_general_blueprint(self) -> None:
        bp = resolve("acme-wholesale")
        self.assertTrue(bp.is_fallback)
        self.assertEqual(bp.category, "general")
        self.assertEqual(bp.tenant_slug, "acme-wholesale")
        self.assertEqual(bp.enabled_entity_types, ("contact", "store", "deal", "task", "note"))

    def test_inferred_category_is_not_fallback(self) -> None:
        bp = resolve("acme", industry="Events & Hospitality")
        self.assertEqual(bp.category, "events")
        self.assertFalse(bp.is_fallback)

    def test_infer_category_rules(self) -> None:
        self.assertEqual(infer_category("toptier-miami"), "partner_promo")
        self.assertEqual(infer_category("unforgettable-nyc"), "events")
        self.assertEqual(infer_category("playboxxx-eu"), "events")
        self.assertEqual(infer_category("store_distribution"), "store_distribution")
        self.assertEqual(infer_category("acme", industry="Tobacco"), "store_distribution")
        self.assertEqual(infer_category("acme", industry="real estate"), "acquisition")
        self.assertEqual(infer_category("acme", business_type="financial_services"), "funding")
        self.assertEqual(infer_category("acme", business_type="Consumer Goods"), "store_distribution")
        self.assertEqual(infer_category("acme"), "general")
        self.assertEqual(infer_category(None), "general")

    def test_slug_rules_win_over_industry(self) -> None:
        self.assertEqual(infer_category("toptier-vip", industry="funding"), "partner_promo")

    def test_distribution_exclusion_only_applies_to_toptier(self) -> None:
        self.assertEqual(infer_category("toptier-distribution"), "general")
        self.assertEqual(infer_category("unforgettable-distribution"), "events")
        self.assertEqual(infer_category("playbox-distribution"), "events")

    def test_tabs_and_list_views_reference_schema_fields(self) -> None:
        system = {"id", "created_at", "updated_at"}
        for row in list(TENANT_BLUEPRINTS.values()) + list(CATEGORY_BLUEPRINTS.values()):
            for entity_type, tabs in row.profile_tabs.items():
                self.assertIn(entity_type, row.enabled_entity_types)
                keys = [t.key for t in tabs]
                self.assertEqual(keys[0], "overview", (row.business_id, entity_type))
                self.assertEqual(len(keys), len(set(keys)))
            for entity_type, list_view in row.list_views.items():
                self.assertIn(entity_type, row.enabled_entity_types)
                known = {fd.key for fd in ENTITY_SCHEMAS[entity_type].fields} | system
                for col in list_view.default_columns:
                    self.assertIn(col, known, (row.business_id, entity_type))
                if list_view.default_sort:
                    self.assertIn(list_view.default_sort[0], known)
                    self.assertIn(list_view.default_sort[1], ("asc", "desc"))
                for flt in list_view.filters:
                    self.assertIn(flt.field, known, (row.business_id, entity_type))

    def test_profile_tabs_and_list_views_resolved(self) -> None:
        bp = resolve("toptier")
        self.assertEqual(bp.get_profile_tabs("partner")[1].label, "Deals / Bookings")
        self.assertEqual(bp.get_list_view("partner").default_sort, ("company_name", "asc"))
        self.assertIsNone(bp.get_list_view("task"))
        self.assertEqual(resolve("acme-wholesale").profile_tabs, {})

    def test_blueprint_to_dict(self) -> None:
        data = blueprint_to_dict(resolve("usa-funding"))
        self.assertEqual(data["enabled_entity_types"], ["client", "funding_application", "task", "note"])
        self.assertTrue(data["fingerprint"].startswith("sha256:"))
        self.assertTrue(data["features"]["show_task_templates"])
        self.assertEqual(data["pipelines"]["funding_application"][0]["value"], "intake")
        funded = next(k for k in data["kpi_config"] if k["key"] == "funded")
        self.assertEqual(funded["filter"], {"status": "funded"})
        self.assertEqual(data["profile_tabs"]["client"][1], {"key": "tasks", "label": "Checklist", "icon": "ClipboardList"})
        self.assertEqual(data["list_views"]["client"]["default_sort"], {"field": "next_follow_up_date", "direction": "asc"})

    def test_resolve_is_pure(self) -> None:
        self.assertEqual(blueprint_to_dict(resolve("the-playboxxx")), blueprint_to_dict(resolve("the-playboxxx")))


if __name__ == "__main__":
    unittest.main()

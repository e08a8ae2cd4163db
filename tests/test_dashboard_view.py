import dataclasses
import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from blueprint_resolver import KPIConfig, resolve
from dashboard_view import build_dashboard_view, entity_cards, kpi_tiles


class TestDashboardView(unittest.TestCase):
    def setUp(self) -> None:
        self.bp = resolve("toptier")

    def test_kpi_tiles_default_to_zero(self) -> None:
        tiles = kpi_tiles(self.bp, {"partner": 5, "promo_campaign": 2, "booking": 3})
        self.assertEqual([t["key"] for t in tiles], ["partners", "active_promos", "bookings", "customers", "influencers"])
        values = {t["key"]: t["value"] for t in tiles}
        self.assertEqual(values["partners"], 5)
        self.assertEqual(values["customers"], 0)
        self.assertEqual(tiles[0]["link"], "/crm/toptier-experience/partner")

    def test_filtered_counts(self) -> None:
        tiles = kpi_tiles(self.bp, {"promo_campaign": 2, "booking": 3}, filtered_counts={"bookings": 1})
        values = {t["key"]: t["value"] for t in tiles}
        self.assertEqual(values["bookings"], 1)
        self.assertEqual(values["active_promos"], 2)

    def test_kpi_for_disabled_type_is_skipped(self) -> None:
        bp = dataclasses.replace(self.bp, kpi_config=self.bp.kpi_config + (KPIConfig("stores", "Stores", "Store", "store"),))
        self.assertNotIn("stores", [t["key"] for t in kpi_tiles(bp, {"store": 9})])

    def test_non_clickable_tile_has_no_link(self) -> None:
        bp = dataclasses.replace(self.bp, kpi_config=(KPIConfig("p", "P", "Users", "partner", clickable=False),))
        self.assertIsNone(kpi_tiles(bp, {})[0]["link"])

    def test_entity_cards(self) -> None:
        cards = entity_cards(self.bp, {"partner": 5, "customer": "bad"})
        self.assertEqual(len(cards), len(self.bp.enabled_entity_types))
        self.assertEqual(cards[0]["label"], "Partners")
        self.assertEqual(cards[0]["count"], 5)
        self.assertEqual(cards[1]["count"], 0)

    def test_build_dashboard_view(self) -> None:
        view = build_dashboard_view(self.bp, None)
        self.assertEqual(view["variant"], "partner_dashboard")
        self.assertEqual(view["entity_type_count"], 7)
        self.assertTrue(all(t["value"] == 0 for t in view["kpis"]))

    def test_generic_dashboard(self) -> None:
        view = build_dashboard_view(resolve("acme-wholesale"), {"contact": 3})
        self.assertEqual(view["variant"], "generic_blueprint")
        self.assertTrue(view["is_fallback"])
        self.assertEqual(view["kpis"][0]["value"], 3)


if __name__ == "__main__":
    unittest.main()

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

from blueprint_resolver import resolve
from entity_profile import build_profile_view, contact_card, overview_rows, pipeline_progress, profile_tabs
from entity_registry import get_entity_schema, get_pipeline


CONTACT = {
    "id": "ct1",
    "name": "Alicia Gomez",
    "phone": "718-555-6001",
    "email": "alicia@cornersmoke.com",
    "city": "Bronx",
    "status": "qualified",
    "favorite_color": "green",
    "tags": ["vip"],
    "meta": {"source": "walk-in"},
    "deleted_at": None,
}


def _tab_keys(tabs):
    return [t["key"] for t in tabs]


class TestPipelineProgress(unittest.TestCase):
    def test_contact_qualified(self) -> None:
        progress = pipeline_progress(get_pipeline("contact"), "qualified")
        self.assertEqual([p["state"] for p in progress], ["completed", "active", "upcoming"])
        self.assertEqual(progress[1]["label"], "Qualified")

    def test_monotonic_for_every_stage(self) -> None:
        stages = get_pipeline("booking")
        for current, stage in enumerate(stages):
            states = [p["state"] for p in pipeline_progress(stages, stage.value)]
            self.assertEqual(states.count("active"), 1)
            self.assertEqual(states.index("active"), current)
            self.assertTrue(all(s == "completed" for s in states[:current]))
            self.assertTrue(all(s == "upcoming" for s in states[current + 1:]))

    def test_unknown_status_or_no_stages(self) -> None:
        self.assertIsNone(pipeline_progress(get_pipeline("contact"), "lost"))
        self.assertIsNone(pipeline_progress(get_pipeline("contact"), None))
        self.assertIsNone(pipeline_progress((), "qualified"))


class TestOverviewRows(unittest.TestCase):
    def test_skips_id_and_nested_values(self) -> None:
        rows = overview_rows(CONTACT, get_entity_schema("contact"))
        keys = [r["key"] for r in rows]
        self.assertNotIn("id", keys)
        self.assertNotIn("tags", keys)
        self.assertNotIn("meta", keys)
        self.assertNotIn("deleted_at", keys)
        self.assertEqual(keys[0], "name")

    def test_labels(self) -> None:
        rows = {r["key"]: r for r in overview_rows(CONTACT, get_entity_schema("contact"))}
        self.assertEqual(rows["name"]["label"], "Full Name")
        self.assertEqual(rows["favorite_color"]["label"], "Favorite Color")
        rows = {r["key"]: r for r in overview_rows(CONTACT)}
        self.assertEqual(rows["name"]["label"], "Name")

    def test_display_values(self) -> None:
        rows = {r["key"]: r for r in overview_rows({"is_remote": True, "notes": ""})}
        self.assertEqual(rows["is_remote"]["display"], "Yes")
        self.assertEqual(rows["notes"]["display"], "-")

    def test_non_dict_row(self) -> None:
        self.assertEqual(overview_rows(None), [])


class TestProfileTabs(unittest.TestCase):
    def test_playboxxx_model_uses_declared_tabs(self) -> None:
        tabs = profile_tabs(resolve("the-playboxxx"), "model")
        self.assertEqual(
            _tab_keys(tabs),
            ["overview", "pipeline", "whatsapp", "media", "contracts", "collabs", "notes"],
        )

    def test_toptier_partner_labels(self) -> None:
        tabs = {t["key"]: t for t in profile_tabs(resolve("toptier"), "partner")}
        self.assertEqual(tabs["bookings"]["label"], "Deals / Bookings")
        self.assertEqual(tabs["assets"]["label"], "Assets (Contracts, Media)")
        self.assertEqual(tabs["interactions"]["icon"], "MessageSquare")
        self.assertNotIn("pipeline", tabs)

    def test_toptier_booking(self) -> None:
        tabs = profile_tabs(resolve("toptier"), "booking")
        self.assertEqual(_tab_keys(tabs), ["overview", "pipeline", "partners", "payments", "notes"])

    def test_feature_flags_gate_declared_tabs(self) -> None:
        bp = resolve("toptier")
        features = dataclasses.replace(bp.features, show_pipeline=False, show_commissions=False, show_bookings=False)
        tabs = profile_tabs(bp, "partner", features)
        self.assertEqual(_tab_keys(tabs), ["overview", "campaigns", "interactions", "notes", "assets"])
        tabs = profile_tabs(bp, "booking", features)
        self.assertEqual(_tab_keys(tabs), ["overview", "partners", "payments", "notes"])

    def test_default_tabs_without_declaration(self) -> None:
        tabs = profile_tabs(resolve("acme-wholesale"), "contact")
        self.assertEqual(_tab_keys(tabs), ["overview", "pipeline", "notes", "tasks"])


class TestBuildProfileView(unittest.TestCase):
    def test_unavailable_views(self) -> None:
        bp = resolve("acme-wholesale")
        view = build_profile_view(bp, "partner", CONTACT)
        self.assertEqual(view["reason"], "ENTITY_NOT_ENABLED")
        view = build_profile_view(bp, "contact", None)
        self.assertEqual(view, {"available": False, "entity_type": "contact", "reason": "RECORD_NOT_FOUND"})

    def test_contact_profile(self) -> None:
        view = build_profile_view(resolve("acme-wholesale"), "contact", CONTACT)
        self.assertTrue(view["available"])
        self.assertEqual(view["display_name"], "Alicia Gomez")
        self.assertEqual(view["status_badge"], {"label": "Qualified", "color": "#60a5fa"})
        self.assertEqual([p["state"] for p in view["pipeline"]], ["completed", "active", "upcoming"])
        self.assertEqual(view["contact"]["phone"], "718-555-6001")
        self.assertEqual(view["contact"]["location"], "Bronx")

    def test_progress_shown_without_pipeline_feature(self) -> None:
        bp = resolve("acme-wholesale")
        features = dataclasses.replace(bp.features, show_pipeline=False)
        view = build_profile_view(bp, "contact", CONTACT, features)
        self.assertEqual([p["state"] for p in view["pipeline"]], ["completed", "active", "upcoming"])
        self.assertNotIn("pipeline", _tab_keys(view["tabs"]))

    def test_stale_status_degrades(self) -> None:
        row = dict(CONTACT, status="archived")
        view = build_profile_view(resolve("acme-wholesale"), "contact", row)
        self.assertTrue(view["available"])
        self.assertIsNone(view["pipeline"])
        self.assertIsNone(view["status_badge"])

    def test_contact_card(self) -> None:
        card = contact_card({"email": "a@b.co", "city": "Miami", "state": "FL"})
        self.assertEqual(card, {"email": "a@b.co", "location": "Miami, FL"})
        self.assertEqual(contact_card({}), {})


if __name__ == "__main__":
    unittest.main()

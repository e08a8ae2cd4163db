import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tenant_router import ExperienceVariant, normalize_slug, overlapping_slugs, route


class TestTenantRouter(unittest.TestCase):
    def test_known_routes(self) -> None:
        self.assertEqual(route("gasmask"), ExperienceVariant.LEGACY)
        self.assertEqual(route("toptier"), ExperienceVariant.PARTNER_DASHBOARD)
        self.assertEqual(route("toptier-experience"), ExperienceVariant.PARTNER_DASHBOARD)
        self.assertEqual(route("acme-wholesale"), ExperienceVariant.GENERIC_BLUEPRINT)

    def test_all_legacy_brands(self) -> None:
        for slug in ("gasmask", "hotmama", "grabba", "scalati"):
            self.assertEqual(route(slug), ExperienceVariant.LEGACY, slug)

    def test_normalization(self) -> None:
        self.assertEqual(route("GASMASK"), route("gasmask"))
        self.assertEqual(route(" gasmask "), route("gasmask"))
        self.assertEqual(route("  TopTier "), ExperienceVariant.PARTNER_DASHBOARD)

    def test_deterministic_and_total(self) -> None:
        for slug in ("", "   ", "usa-funding", "GRABBA", "x" * 200, "the-playboxxx"):
            first = route(slug)
            self.assertIn(first, list(ExperienceVariant))
            self.assertEqual(first, route(slug))

    def test_empty_slug_is_generic(self) -> None:
        self.assertEqual(route(""), ExperienceVariant.GENERIC_BLUEPRINT)
        self.assertEqual(route(None), ExperienceVariant.GENERIC_BLUEPRINT)

    def test_sets_do_not_overlap(self) -> None:
        self.assertEqual(overlapping_slugs(), frozenset())

    def test_normalize_slug(self) -> None:
        self.assertEqual(normalize_slug("  Usa-Funding "), "usa-funding")
        self.assertEqual(normalize_slug(None), "")


if __name__ == "__main__":
    unittest.main()

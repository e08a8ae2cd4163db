import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app.records_validation import validate_record_payload
from app.simulation import simulation_counts, simulation_dataset, simulation_rows
from blueprint_resolver import TENANT_BLUEPRINTS, resolve


class TestSimulation(unittest.TestCase):
    def test_rows_for_enabled_types(self) -> None:
        bp = resolve("toptier")
        self.assertEqual(len(simulation_rows(bp, "partner")), 5)
        self.assertEqual(simulation_rows(bp, "client"), [])
        self.assertEqual(simulation_rows(bp, "promo_campaign"), [])

    def test_rows_are_copies(self) -> None:
        bp = resolve("toptier")
        rows = simulation_rows(bp, "partner")
        rows[0]["company_name"] = "Changed"
        self.assertEqual(simulation_rows(bp, "partner")[0]["company_name"], "Luxury Wheels NYC")

    def test_counts_cover_enabled_types(self) -> None:
        bp = resolve("usa-funding")
        counts = simulation_counts(bp)
        self.assertEqual(set(counts), set(bp.enabled_entity_types))
        self.assertEqual(counts["client"], 5)
        self.assertEqual(counts["note"], 0)

    def test_general_blueprint_has_demo_rows(self) -> None:
        self.assertEqual(len(simulation_rows(resolve("acme-wholesale"), "contact")), 3)

    def test_demo_rows_pass_write_validation(self) -> None:
        slugs = list(TENANT_BLUEPRINTS) + ["acme-wholesale"]
        for slug in slugs:
            bp = resolve(slug)
            for entity_type, rows in simulation_dataset(bp).items():
                schema = bp.get_entity_schema(entity_type)
                for row in rows:
                    errors, _ = validate_record_payload(schema, row, for_create=True, stages=bp.get_pipeline(entity_type))
                    self.assertEqual(errors, [], f"{slug}:{entity_type}:{row.get('id')}")


if __name__ == "__main__":
    unittest.main()

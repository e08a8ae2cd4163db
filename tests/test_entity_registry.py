import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from entity_registry import (
    ENTITY_SCHEMAS,
    PIPELINES,
    EntitySchema,
    FieldType,
    get_entity_schema,
    get_pipeline,
    humanize_key,
    schema_to_dict,
    stage_index,
    validate_registry,
    _f,
    _opts,
)


class TestEntityRegistry(unittest.TestCase):
    def test_registry_is_consistent(self) -> None:
        self.assertEqual(validate_registry(), [])

    def test_every_pipeline_has_a_schema(self) -> None:
        for key in PIPELINES:
            self.assertIn(key, ENTITY_SCHEMAS)

    def test_status_options_follow_pipeline(self) -> None:
        for key, stages in PIPELINES.items():
            status = ENTITY_SCHEMAS[key].status_field()
            self.assertIsNotNone(status, key)
            self.assertEqual(status.option_values(), [s.value for s in stages])

    def test_contact_pipeline(self) -> None:
        self.assertEqual([s.value for s in get_pipeline("contact")], ["new", "qualified", "won"])

    def test_missing_pipeline_is_empty(self) -> None:
        self.assertEqual(get_pipeline("note"), ())
        self.assertEqual(get_pipeline("nope"), ())
        self.assertEqual(get_pipeline(None), ())

    def test_get_entity_schema(self) -> None:
        schema = get_entity_schema("partner")
        self.assertEqual(schema.label_plural, "Partners")
        self.assertEqual(schema.field("commission_rate").type, FieldType.PERCENTAGE)
        self.assertTrue(schema.field("commission_rate").required)
        self.assertIsNone(get_entity_schema("unknown"))
        self.assertIsNone(get_entity_schema(42))

    def test_stage_index(self) -> None:
        stages = get_pipeline("contact")
        self.assertEqual(stage_index(stages, "qualified"), 1)
        self.assertIsNone(stage_index(stages, "lost"))
        self.assertIsNone(stage_index(stages, ""))
        self.assertIsNone(stage_index(stages, None))

    def test_humanize_key(self) -> None:
        self.assertEqual(humanize_key("next_follow_up_date"), "Next Follow Up Date")
        self.assertEqual(humanize_key("city"), "City")

    def test_detects_status_domain_drift(self) -> None:
        schema = EntitySchema(
            entity_type="contact",
            label="Contact",
            label_plural="Contacts",
            icon="Users",
            color="#000",
            fields=(
                _f("name", "Name"),
                _f("status", "Status", FieldType.SELECT, options=_opts(("new", "New"))),
            ),
        )
        issues = validate_registry({"contact": schema}, {"contact": get_pipeline("contact")})
        self.assertEqual([i["code"] for i in issues], ["STATUS_DOMAIN_MISMATCH"])

    def test_detects_unknown_column_and_duplicate_field(self) -> None:
        schema = EntitySchema(
            entity_type="thing",
            label="Thing",
            label_plural="Things",
            icon="Box",
            color="#000",
            fields=(_f("name", "Name"), _f("name", "Name again")),
            list_columns=("name", "ghost"),
        )
        codes = {i["code"] for i in validate_registry({"thing": schema}, {})}
        self.assertEqual(codes, {"FIELD_KEY_DUPLICATE", "COLUMN_UNKNOWN"})

    def test_pipeline_for_unknown_entity(self) -> None:
        issues = validate_registry({}, {"ghost": get_pipeline("contact")})
        self.assertEqual(issues[0]["code"], "PIPELINE_UNKNOWN_ENTITY")

    def test_schema_to_dict_uses_plain_values(self) -> None:
        data = schema_to_dict(get_entity_schema("contact"))
        self.assertEqual(data["fields"][0]["key"], "name")
        self.assertEqual(data["fields"][0]["type"], "text")
        status = next(f for f in data["fields"] if f["key"] == "status")
        self.assertEqual([o["value"] for o in status["options"]], ["new", "qualified", "won"])
        self.assertEqual(data["searchable_fields"], ["name", "company", "phone", "email"])


if __name__ == "__main__":
    unittest.main()

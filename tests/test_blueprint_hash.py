import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from dynasty.blueprint_hash import blueprint_hash, etag_for, etag_matches
from blueprint_resolver import blueprint_to_dict, resolve


class TestBlueprintHash(unittest.TestCase):
    def test_hash_deterministic_with_key_order(self) -> None:
        self.assertEqual(blueprint_hash({"b": 1, "a": 2}), blueprint_hash({"a": 2, "b": 1}))

    def test_hash_differs_for_different_content(self) -> None:
        self.assertNotEqual(blueprint_hash({"a": 1}), blueprint_hash({"a": 2}))

    def test_hash_format(self) -> None:
        h = blueprint_hash({"a": 1})
        self.assertTrue(h.startswith("sha256:"))
        self.assertEqual(len(h), len("sha256:") + 64)

    def test_hash_rejects_nan(self) -> None:
        with self.assertRaises(ValueError):
            blueprint_hash({"bad": float("nan")})

    def test_blueprint_fingerprint_is_stable(self) -> None:
        a = blueprint_to_dict(resolve("toptier"))
        b = blueprint_to_dict(resolve(" TopTier-Experience "))
        self.assertEqual(a["fingerprint"], b["fingerprint"])
        self.assertEqual(a["tenant_slug"], "toptier-experience")
        body = {k: v for k, v in a.items() if k != "fingerprint"}
        self.assertEqual(a["fingerprint"], blueprint_hash(body))

    def test_existing_fingerprint_is_ignored(self) -> None:
        payload = blueprint_to_dict(resolve("usa-funding"))
        self.assertEqual(blueprint_hash(payload), payload["fingerprint"])
        self.assertEqual(blueprint_hash({"a": 1, "fingerprint": "x"}), blueprint_hash({"a": 1}))

    def test_etag_matching(self) -> None:
        fp = blueprint_hash({"a": 1})
        self.assertEqual(etag_for(fp), f'"{fp}"')
        self.assertTrue(etag_matches(etag_for(fp), fp))
        self.assertTrue(etag_matches(f'"sha256:old", W/{etag_for(fp)}', fp))
        self.assertTrue(etag_matches("*", fp))
        self.assertFalse(etag_matches('"sha256:old"', fp))
        self.assertFalse(etag_matches(None, fp))
        self.assertFalse(etag_matches(fp, fp))

    def test_different_tenants_have_different_fingerprints(self) -> None:
        self.assertNotEqual(
            blueprint_to_dict(resolve("usa-funding"))["fingerprint"],
            blueprint_to_dict(resolve("the-playboxxx"))["fingerprint"],
        )


if __name__ == "__main__":
    unittest.main()

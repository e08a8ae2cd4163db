"""Blueprint fingerprints and the HTTP validators derived from them."""

from __future__ import annotations

import hashlib
from typing import Any

from .canonical_json import canonical_dumps

FINGERPRINT_KEY = "fingerprint"


def blueprint_hash(payload: Any) -> str:
    """Return ``sha256:<hex>`` over the canonical form of ``payload``.

    A top-level ``fingerprint`` entry is left out, so hashing an already
    fingerprinted payload gives back the same value.
    """
    if isinstance(payload, dict) and FINGERPRINT_KEY in payload:
        payload = {k: v for k, v in payload.items() if k != FINGERPRINT_KEY}
    digest = hashlib.sha256(canonical_dumps(payload).encode("utf-8")).hexdigest()
    return f"sha256:{digest}"


def etag_for(fingerprint: str) -> str:
    return f'"{fingerprint}"'


def etag_matches(if_none_match: str | None, fingerprint: str) -> bool:
    """True when an ``If-None-Match`` header already names ``fingerprint``.

    Handles ``*``, comma-separated lists and weak (``W/``) validators.
    """
    if not if_none_match:
        return False
    for candidate in if_none_match.split(","):
        candidate = candidate.strip()
        if candidate == "*":
            return True
        if candidate.startswith("W/"):
            candidate = candidate[2:]
        if candidate == etag_for(fingerprint):
            return True
    return False

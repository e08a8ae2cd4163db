"""Dynasty CRM kernel utilities."""

from .blueprint_hash import blueprint_hash
from .canonical_json import CanonicalJsonTypeError, canonical_dumps

__all__ = [
    "CanonicalJsonTypeError",
    "blueprint_hash",
    "canonical_dumps",
]

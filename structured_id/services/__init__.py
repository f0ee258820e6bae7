"""Core codec services."""

from structured_id.services.codec import (
    CodecService,
    generate_id,
    generate_ids,
    normalize_id,
    validate_id,
)
from structured_id.services.entropy import (
    EntropySource,
    FallbackEntropySource,
    StrongEntropySource,
    resolve_entropy_source,
)
from structured_id.services.formatter import format_id, parse_display

__all__ = [
    "CodecService",
    "generate_id",
    "generate_ids",
    "normalize_id",
    "validate_id",
    "format_id",
    "parse_display",
    "EntropySource",
    "StrongEntropySource",
    "FallbackEntropySource",
    "resolve_entropy_source",
]

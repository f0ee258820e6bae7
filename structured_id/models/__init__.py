"""Pydantic data models."""

from structured_id.models.config import (
    Algorithm,
    Charset,
    CodeConfig,
    EntropyPreference,
    resolve_config,
)

__all__ = ["Algorithm", "Charset", "CodeConfig", "EntropyPreference", "resolve_config"]

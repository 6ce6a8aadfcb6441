from __future__ import annotations

from core.validation_result import ValidationResult
from doc_types.config.model import CacheConfig


def validate(config: CacheConfig) -> ValidationResult:
    """Validate a parsed cache configuration."""
    errors: list[str] = []
    warnings: list[str] = []

    if not config.hash_algorithm.strip():
        errors.append("Hash algorithm is empty.")

    if config.local.max_builds_cached < 1:
        errors.append(
            f"maxBuildsCached must be at least 1 (got {config.local.max_builds_cached})."
        )

    if config.remote.enabled and not (config.remote.url or "").strip():
        errors.append("Remote cache is enabled but no URL is configured.")

    if config.remote.save_to_remote and not config.remote.enabled:
        warnings.append("saveToRemote has no effect while the remote cache is disabled.")

    if not config.input.glob.strip():
        warnings.append("Empty input glob; no project files will be hashed.")

    return ValidationResult(errors=errors, warnings=warnings)

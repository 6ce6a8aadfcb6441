from __future__ import annotations

from core.validation_result import ValidationResult
from doc_types.build_diff.model import BuildDiff


def validate(diff: BuildDiff) -> ValidationResult:
    errors: list[str] = []
    warnings: list[str] = []

    for index, mismatch in enumerate(diff.mismatches):
        if not mismatch.item.strip():
            errors.append(f"Mismatch #{index} has an empty item.")
        elif mismatch.current == mismatch.baseline:
            warnings.append(
                f"Mismatch '{mismatch.item}' has identical current and baseline values."
            )

    return ValidationResult(errors=errors, warnings=warnings)

"""
Cache report validation.

A report listing the same module twice is still readable (the last
entry wins for consumers), so duplicates are only a warning.
"""
from __future__ import annotations

from collections import Counter

from core.validation_result import ValidationResult
from doc_types.report.model import CacheReport


def validate(report: CacheReport) -> ValidationResult:
    errors: list[str] = []
    warnings: list[str] = []

    for index, project in enumerate(report.projects):
        if not project.group_id.strip() or not project.artifact_id.strip():
            errors.append(f"Project #{index} must have a groupId and an artifactId.")
        if not project.checksum.strip():
            errors.append(f"Project #{index} ({project.coordinate}) has an empty checksum.")
        if project.shared_to_remote and not project.url:
            warnings.append(f"Project {project.coordinate} is shared to remote without a URL.")

    counts = Counter(p.coordinate for p in report.projects)
    dupes = sorted(c for c, n in counts.items() if n > 1)
    if dupes:
        warnings.append(f"Duplicate project(s) in report: {', '.join(dupes)}")

    return ValidationResult(errors=errors, warnings=warnings)

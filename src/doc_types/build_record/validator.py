"""
Build record validation.

Runs after parsing; errors fail the read, warnings are logged by the
caller and the record is still returned.
"""
from __future__ import annotations

from core.validation_result import ValidationResult
from doc_types.build_record.model import Artifact, BuildRecord

COORDINATE_SEPARATOR = ":"


def validate(record: BuildRecord) -> ValidationResult:
    errors: list[str] = []
    warnings: list[str] = []

    if not record.project.strip():
        errors.append("Project coordinate is empty.")
    else:
        parts = record.project.split(COORDINATE_SEPARATOR)
        if len(parts) < 2 or not all(p.strip() for p in parts[:2]):
            errors.append(
                f"Project coordinate '{record.project}' must be at least groupId:artifactId."
            )

    if not record.checksum.strip():
        errors.append("Project checksum is empty.")

    if not record.hash_algorithm.strip():
        errors.append("Hash algorithm is empty.")

    artifacts = ([record.artifact] if record.artifact is not None else []) + list(record.attached_artifacts)
    for artifact in artifacts:
        errors.extend(_artifact_errors(artifact))

    for index, item in enumerate(record.inputs):
        if not item.type.strip() or not item.hash.strip():
            errors.append(f"Input #{index} must have a type and a hash.")

    if record.final and record.artifact is None and not record.attached_artifacts:
        warnings.append("Final build record has no artifacts.")

    return ValidationResult(errors=errors, warnings=warnings)


def _artifact_errors(artifact: Artifact) -> list[str]:
    errors: list[str] = []
    if not artifact.group_id.strip() or not artifact.artifact_id.strip():
        errors.append("Artifact must have a groupId and an artifactId.")
    if artifact.file_size < 0:
        errors.append(
            f"Artifact {artifact.group_id}:{artifact.artifact_id} has a negative file size."
        )
    return errors

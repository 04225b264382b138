"""Manifest shape validation.

Untrusted documents (third-party manifests, or a replaced first-party one)
pass through here before they are merged. The result is tagged: either a
typed :class:`Manifest` or a :class:`ManifestValidationError` naming the
path that failed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union, cast

import pydantic

from vitrine_common import ManifestValidationError, get_logger
from vitrine_catalog.models import Manifest

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of :func:`validate_manifest`.

    Exactly one of ``manifest`` and ``error`` is set.
    """

    manifest: Optional[Manifest] = None
    error: Optional[ManifestValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Manifest:
        """Return the manifest or raise the validation error."""
        if self.error is not None:
            raise self.error
        return cast(Manifest, self.manifest)


def format_location(loc: Sequence[Union[str, int]]) -> str:
    """Render a pydantic error location as ``[0].collections[1].id``."""
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            parts.append(f"[{segment}]")
        else:
            parts.append(f".{segment}" if parts else segment)
    return "".join(parts)


def _describe(errors: list[dict[str, Any]]) -> list[tuple[str, str]]:
    problems = []
    for err in errors:
        problems.append((format_location(err.get("loc", ())), err.get("msg", "invalid value")))
    return problems


def validate_manifest(raw: Any) -> ValidationResult:
    """Check a parsed JSON value against the manifest shape.

    Args:
        raw: Any value produced by ``json.loads``

    Returns:
        ValidationResult holding either the manifest or the error
    """
    if not isinstance(raw, list):
        error = ManifestValidationError(
            f"manifest must be a JSON array of users, got {type(raw).__name__}",
            path="",
            problems=[("", "expected array")],
        )
        return ValidationResult(error=error)

    try:
        manifest = Manifest.model_validate(raw)
    except pydantic.ValidationError as e:
        problems = _describe(e.errors(include_url=False))
        path, msg = problems[0] if problems else ("", "invalid manifest")
        logger.debug("manifest_validation_failed", path=path, problem_count=len(problems))
        return ValidationResult(
            error=ManifestValidationError(msg, path=path, problems=problems)
        )

    return ValidationResult(manifest=manifest)


def parse_manifest(raw: Any) -> Manifest:
    """Validate ``raw`` and return the manifest.

    Raises:
        ManifestValidationError: If the document has the wrong shape
    """
    return validate_manifest(raw).unwrap()

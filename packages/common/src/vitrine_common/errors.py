"""Custom error types for the vitrine catalog.

Three kinds are user-facing and recoverable: a malformed manifest document,
an identifier that does not resolve, and a broken third-party source.
They are kept apart so callers never collapse them into one message.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class VitrineError(Exception):
    """Base exception for all vitrine errors."""

    pass


class ManifestValidationError(VitrineError):
    """Manifest document does not have the expected shape.

    Only the offending document is rejected; the previously valid
    hierarchy stays in use.

    Attributes:
        path: Location of the first failing field, e.g. ``[0].collections[1].id``
        problems: Every ``(path, message)`` pair that failed validation
    """

    def __init__(
        self,
        message: str,
        path: str = "",
        problems: Optional[Sequence[tuple[str, str]]] = None,
    ):
        self.message = message
        self.path = path
        self.problems = list(problems or [])
        super().__init__(f"{path}: {message}" if path else message)


class ExternalManifestError(VitrineError):
    """Third-party manifest could not be fetched, parsed or validated.

    Attributes:
        url: The manifest URL that failed
        cause: Underlying transport, decode or validation exception
    """

    def __init__(self, url: str, cause: Optional[BaseException] = None):
        self.url = url
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to load manifest from {url}{detail}")


class NotFoundError(VitrineError):
    """A navigation path does not resolve.

    Raised at the loader boundary only; lookups return a ``NotFound`` value.
    """

    def __init__(self, not_found: Any):
        self.not_found = not_found
        describe = getattr(not_found, "describe", None)
        super().__init__(describe() if callable(describe) else str(not_found))


class HierarchyNotLoadedError(VitrineError):
    """Lookup attempted before any hierarchy was built."""

    pass

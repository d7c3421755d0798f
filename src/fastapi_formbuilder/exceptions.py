"""FormException hierarchy for controlled request aborts."""

from __future__ import annotations

from collections.abc import Sequence


class FormException(Exception):
    """Base for all form setup exceptions."""


class FormAbort(FormException):
    """Controlled abort with HTTP status code and client-facing detail.

    ``message`` is the server-side text used for ``str(exc)``; it defaults
    to ``detail``.
    """

    def __init__(
        self, detail: str, *, status_code: int = 400, message: str | None = None
    ) -> None:
        super().__init__(message or detail)
        self.status_code = status_code
        self.detail = detail


class MissingRequiredSource(FormAbort):
    """An explicitly named form config file was not found (500).

    The search path only appears in ``str(exc)``, never in ``detail``.
    """

    def __init__(self, name: str, filename: str, search_path: Sequence[str]) -> None:
        self.name = name
        self.filename = filename
        self.search_path = list(search_path)
        detail = f"Form ({name}): Can't find form config {filename}"
        super().__init__(
            detail,
            status_code=500,
            message=f"{detail} in {':'.join(self.search_path)}",
        )


class FormInternalError(FormException):
    """Engine-level error wrapping unexpected exceptions."""

    def __init__(self, detail: str, *, cause: Exception | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.cause = cause

"""Error kinds and the exceptions the HTTP error responder maps to status codes."""

from enum import Enum


class ErrorKind(str, Enum):
    """Observable failure categories, each with a fixed HTTP status."""

    AUTH = "auth"
    UNHANDLED = "unhandled"

    @property
    def status_code(self) -> int:
        return HTTP_STATUS_BY_KIND[self]


HTTP_STATUS_BY_KIND = {
    ErrorKind.AUTH: 401,
    ErrorKind.UNHANDLED: 500,
}


class AppError(Exception):
    """Base application error carrying an explicit kind and message."""

    kind: ErrorKind = ErrorKind.UNHANDLED

    def __init__(self, message: str, kind: ErrorKind | None = None) -> None:
        self.message = message
        if kind is not None:
            self.kind = kind
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code


class AuthError(AppError):
    """Raised for bad or missing session tokens, unknown users, and OAuth errors reported by GitHub."""

    kind = ErrorKind.AUTH

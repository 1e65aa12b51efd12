"""Bosun emitter error taxonomy.

Errors are tagged rather than subclassed: each family is a single exception
class carrying an enum discriminator, so callers branch on ``err.kind`` or
``err.reason`` instead of on ``isinstance`` checks.

Families:
    EmitterError (kind: ENCODE | EMIT | RECEIVE)
        Raised while encoding or delivering a document.
    ModeError (reason: NO_METADATA | NO_VALUE | NO_SUCH_MODE)
        Raised when a configuration does not describe any legal send mode.
    ConfigError
        Raised when the scollector config file or a tag string is unusable.
"""

from enum import Enum
from typing import Optional


class BosunEmitterException(Exception):
    """Base exception carrying a message and a debugging context."""

    def __init__(self, message: str, context: Optional[dict] = None):
        """Initialize exception.

        Args:
            message: Error message
            context: Optional context dictionary for debugging
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation with context."""
        if self.context:
            context_str = "; ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class EmitterErrorKind(str, Enum):
    """Where an emission failed."""

    ENCODE = "encode"
    """Payload could not be serialized to JSON"""

    EMIT = "emit"
    """Document could not be sent (DNS, connect, TLS, write, timeout)"""

    RECEIVE = "receive"
    """Server answered with something other than 204 No Content"""


class EmitterError(BosunEmitterException):
    """Failure to encode or deliver a metadata or datum document.

    Attributes:
        kind: Which stage failed
        status_code: HTTP status for RECEIVE failures
        detail: Underlying error text or (truncated) response body
    """

    def __init__(
        self,
        kind: EmitterErrorKind,
        message: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        if status_code is not None:
            context["status_code"] = status_code
        if detail:
            context["detail"] = detail[:200]
        super().__init__(message, context)
        self.kind = kind
        self.status_code = status_code
        self.detail = detail

    @classmethod
    def encode(cls, error: Exception) -> "EmitterError":
        return cls(EmitterErrorKind.ENCODE, f"{error}", detail=f"{error}")

    @classmethod
    def emit(cls, error: Exception) -> "EmitterError":
        return cls(EmitterErrorKind.EMIT, f"{error}", detail=f"{error}")

    @classmethod
    def receive(cls, status_code: int, reason: str, body: str = "") -> "EmitterError":
        return cls(
            EmitterErrorKind.RECEIVE,
            f"{status_code} {reason}".strip(),
            status_code=status_code,
            detail=body or None,
        )


class ModeErrorReason(str, Enum):
    """Why no send mode could be resolved."""

    NO_METADATA = "no_metadata"
    """Datum requested but metadata incomplete and not forced"""

    NO_VALUE = "no_value"
    """Metric named but no value and no complete metadata"""

    NO_SUCH_MODE = "no_such_mode"
    """No metric, or any other combination that makes no sense"""


_MODE_ERROR_MESSAGES = {
    ModeErrorReason.NO_METADATA: "Cannot send datum without meta data.",
    ModeErrorReason.NO_VALUE: "Cannot send datum without value.",
    ModeErrorReason.NO_SUCH_MODE: "Command line arguments combination does not make any sense.",
}


class ModeError(BosunEmitterException):
    """Configuration does not describe a legal send mode."""

    def __init__(self, reason: ModeErrorReason, context: Optional[dict] = None):
        super().__init__(_MODE_ERROR_MESSAGES[reason], context)
        self.reason = reason


class ConfigError(BosunEmitterException):
    """Raised when configuration cannot be loaded or parsed.

    Attributes:
        path: Config file path, if the failure came from a file
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        if path:
            context["path"] = path
        super().__init__(message, context)
        self.path = path


__all__ = [
    "BosunEmitterException",
    "EmitterErrorKind",
    "EmitterError",
    "ModeErrorReason",
    "ModeError",
    "ConfigError",
]

"""Exception hierarchy for domain and infrastructure failures."""

from __future__ import annotations

from enum import Enum


class LiumError(Exception):
    """Base class for every error raised by the package."""

    label: str | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        if self.label is None:
            return self.message
        return f"{self.label}: {self.message}"


class InvalidInputError(LiumError, ValueError):
    """User-supplied input could not be accepted."""

    label = "Invalid input"


class NotFoundError(LiumError, LookupError):
    """A requested resource does not exist."""

    label = "Not found"


class OperationFailedError(LiumError):
    """An operation could not be completed."""

    label = "Operation failed"


class ValidationFailedError(LiumError, ValueError):
    """A value failed validation."""

    label = "Validation failed"


class DomainRuleViolation(LiumError):
    """A business rule was broken."""

    label = "Domain rule violation"


class ResourceConflict(LiumError):
    """Two resources are in conflict."""

    label = "Resource conflict"


class UtilsError(LiumError):
    """Base class for failures in infrastructure helpers."""


class _KindedError(UtilsError):
    """Infrastructure error carrying a failure kind."""

    def __init__(self, kind: Enum, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    def __str__(self) -> str:
        return f"{self.label}: {self.kind.value}: {self.message}"


class SshFailure(Enum):
    COMMAND_FAILED = "SSH command failed"
    CONNECTION_FAILED = "SSH connection failed"
    AUTHENTICATION_FAILED = "SSH authentication failed"
    TRANSFER_FAILED = "SSH file transfer failed"
    KEY_ERROR = "SSH key error"


class SshError(_KindedError):
    """An SSH, SCP or rsync operation failed."""

    label = "SSH error"


class DockerFailure(Enum):
    COMMAND_FAILED = "Docker command failed"
    API_ERROR = "Docker API error"
    CONTAINER_NOT_FOUND = "Container not found"
    IMAGE_NOT_FOUND = "Image not found"
    LOGIN_FAILED = "Docker login failed"
    BUILD_FAILED = "Docker build failed"
    PUSH_FAILED = "Docker push failed"
    INVALID_PATH = "Invalid path"
    NOT_AVAILABLE = "Docker not available"
    INVALID_IMAGE_NAME = "Invalid image name"


class DockerError(_KindedError):
    """A Docker operation failed."""

    label = "Docker error"


class GpuFailure(Enum):
    DETECTION_FAILED = "GPU detection failed"
    NOT_AVAILABLE = "GPU not available"
    COMMAND_FAILED = "GPU command failed"


class GpuError(_KindedError):
    """A GPU related operation failed."""

    label = "GPU error"


class ParseFailure(Enum):
    INVALID_FORMAT = "Failed to parse"
    MISSING_FIELD = "Missing required field"
    INVALID_VALUE = "Invalid value"


class ParseError(_KindedError, ValueError):
    """Text or data could not be parsed."""

    label = "Parse error"


class ProcessError(UtilsError):
    """An external process could not be run."""

    label = "Process error"
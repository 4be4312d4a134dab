"""Central installer exception hierarchy.

This module defines the base exception ``AppError`` and one subclass per
failure mode of the installation flow (missing tools, declined installs,
invalid selections and failed external commands). The orchestrator catches
``AppError`` in a single place and turns it into a console message and an
exit status.
"""

from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base exception for all installer errors.

    Parameters
    ----------
    code : str
        Machine-readable error code (e.g., ``'CLONE_FAILED'``).
    message : str
        Human-readable message describing the error.
    context : Mapping[str, Any] | None, optional
        Optional structured context for logging.
    transient : bool, optional
        Whether the error is temporary and may succeed when re-run.

    Attributes
    ----------
    code : str
        Stable machine-readable error code.
    message : str
        Human-readable message.
    context : dict
        Structured, non-sensitive context for logging.
    transient : bool
        True if the error is transient.
    exit_code : int
        Process exit status the orchestrator reports for this error.

    Examples
    --------
    >>> e = AppError('CODE', 'message', context={'k': 'v'}, transient=True)
    >>> e.code
    'CODE'
    >>> e.exit_code
    1
    """

    __slots__ = ("code", "message", "context", "transient")

    exit_code: int = 1

    def __init__(
        self,
        code: str,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.context = dict(context or {})
        self.transient = bool(transient)

    def __str__(self) -> str:
        """Return a compact string representation of the error."""
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return a log-safe dictionary representation of the error."""
        return {
            "error_code": self.code,
            "message": self.message,
            "context": self.context,
            "is_transient": self.transient,
            "exit_code": self.exit_code,
        }


class MissingExecutableError(AppError):
    """Raised when a required executable cannot be found on ``PATH``."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("MISSING_EXECUTABLE", message, context=context)


class InstallDeclinedError(AppError):
    """Raised when the user declines installing a missing tool."""

    exit_code = 0

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("INSTALL_DECLINED", message, context=context)


class RestartRequiredError(AppError):
    """Raised after installing a tool that this process cannot see yet."""

    exit_code = 0

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("RESTART_REQUIRED", message, context=context)


class ToolInstallError(AppError):
    """Raised when the bootstrap command for a missing tool fails."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "TOOL_INSTALL_FAILED", message, context=context, transient=True
        )


class InvalidSelectionError(AppError):
    """Raised for a non-numeric or out-of-range version choice."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("INVALID_SELECTION", message, context=context)


class CloneError(AppError):
    """Raised when cloning the source repository fails."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("CLONE_FAILED", message, context=context, transient=True)


class MissingRequirementsError(AppError):
    """Raised when the dependency manifest is absent or cannot be fetched."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("MISSING_REQUIREMENTS", message, context=context)


class VenvCreationError(AppError):
    """Raised when the package manager fails to create the environment."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("VENV_CREATION_FAILED", message, context=context)


class DependencyInstallError(AppError):
    """Raised when dependency installation fails after the fallback."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("DEPENDENCY_INSTALL_FAILED", message, context=context)


class WheelDownloadError(AppError):
    """Raised when the prebuilt fallback wheel cannot be downloaded."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__(
            "WHEEL_DOWNLOAD_FAILED", message, context=context, transient=True
        )


class WheelInstallError(AppError):
    """Raised when installing the prebuilt fallback wheel fails."""

    def __init__(
        self, message: str, *, context: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__("WHEEL_INSTALL_FAILED", message, context=context)

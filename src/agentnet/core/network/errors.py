"""Error types for loading and linking agent networks."""

from __future__ import annotations

from typing import Any


class NetworkError(Exception):
    """Base error for all network compiler failures."""


class NetworkLoadError(NetworkError):
    """A network document could not be read, parsed, or validated.

    Load errors are fatal: the first one aborts the whole load.
    """

    def __init__(self, file_path: str, reason: str, details: Any = None) -> None:
        self.file_path = file_path
        self.reason = reason
        self.details = details
        super().__init__(f"Failed to parse {file_path}: {reason}")


class UnknownProviderError(NetworkError):
    """The manifest declares no preset for the requested provider."""

    def __init__(self, provider: str, available: list[str] | None = None) -> None:
        self.provider = provider
        self.available = available or []
        msg = f"Unknown provider: {provider}"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        super().__init__(msg)

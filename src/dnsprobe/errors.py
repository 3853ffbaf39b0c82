"""Error types raised while building scan options."""

from __future__ import annotations


class OptionsError(ValueError):
    """Base class for option parsing and validation failures."""


class ValidationError(OptionsError):
    """Raised when input flags violate an exclusivity or dependency rule."""


class RCodeParseError(OptionsError):
    """Raised when an rcode token is neither a known name nor an integer."""

    def __init__(self, token: str) -> None:
        """Initialize an rcode parse error.

        Args:
            token (str): Offending token as supplied by the user.
        """
        super().__init__(f"invalid rcode value '{token}'")
        self.token = token


InvalidRCode = RCodeParseError


class ResumeLoadError(OptionsError):
    """Raised when an existing resume file cannot be deserialized."""

    def __init__(self, path: object, reason: str) -> None:
        """Initialize a resume load error.

        Args:
            path (object): Path of the resume file.
            reason (str): Human-readable failure reason.
        """
        super().__init__(f"could not load resume file {path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = [
    "InvalidRCode",
    "OptionsError",
    "RCodeParseError",
    "ResumeLoadError",
    "ValidationError",
]

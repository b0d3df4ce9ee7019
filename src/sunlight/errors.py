"""Error handling utilities for the solar ephemeris engine."""

import sys
from typing import Optional


class SunlightError(Exception):
    """Base exception for sunlight-specific errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        """Initialize with message and optional suggestions.

        Args:
            message: Error description
            suggestions: Optional list of actionable suggestions
        """
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with suggestions."""
        formatted = f"{self.message}"
        if self.suggestions:
            formatted += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                formatted += f"\n  - {suggestion}"
        return formatted


class TimeParseError(SunlightError):
    """Raised when a local timestamp cannot be parsed."""

    def __init__(self, local_time: str):
        message = f"Invalid local time format: '{local_time}'"
        suggestions = [
            "Use ISO-8601 format without a UTC offset (e.g., '2024-06-21T12:00:00')",
            "Omit the option to use the current system time",
            "Example: --time 2024-06-21T12:00:00",
        ]
        super().__init__(message, suggestions)


class EngineStateError(SunlightError):
    """Raised when the engine is queried before its first update."""

    def __init__(self, query: str):
        message = f"Cannot answer '{query}': the sun position has not been computed yet"
        suggestions = [
            "Call update() with an instant (or let it read the clock) before querying",
        ]
        super().__init__(message, suggestions)


class ReferenceUnavailableError(SunlightError):
    """Raised when the high-precision reference ephemeris cannot be loaded."""

    def __init__(self, ephemeris_name: str, reason: str):
        message = f"Reference ephemeris {ephemeris_name} is not available: {reason}"
        suggestions = [
            "Check network access; skyfield downloads the ephemeris on first use",
            "Place the file in the working directory to use it offline",
            "Run without --compare to skip the reference check",
        ]
        super().__init__(message, suggestions)


def print_error(error: Exception) -> None:
    """Print error to stderr with formatted output.

    Args:
        error: Exception to print
    """
    print(f"Error: {error}", file=sys.stderr)

    if isinstance(error, SunlightError):
        if error.suggestions:
            print(file=sys.stderr)


def handle_error(error: Exception, context: Optional[str] = None) -> int:
    """Handle an error with optional context and return exit code.

    Args:
        error: Exception that occurred
        context: Optional description of what was being attempted

    Returns:
        Exit code (1 for error)
    """
    if context:
        print(f"Error while {context}:", file=sys.stderr)

    print_error(error)

    import traceback

    if not isinstance(error, SunlightError):
        traceback.print_exc()

    return 1

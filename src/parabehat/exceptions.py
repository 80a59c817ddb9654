#
# src/parabehat/exceptions.py
#
"""
Exception hierarchy for parabehat.
"""


class ParabehatError(Exception):
    """Base class for all parabehat errors."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: Exception | None = None,
    ):
        self.path = path
        self.details = details
        full_message = message
        if path:
            full_message += f" (Path: '{path}')"
        super().__init__(full_message)
        if details and hasattr(self, "add_note"):
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class ConfigurationError(ParabehatError):
    """Raised when the runner configuration is invalid."""

    pass


class DiscoveryError(ParabehatError):
    """Raised when test files cannot be enumerated."""

    pass


class ExecutionEnvironmentError(ParabehatError):
    """
    Raised when a child process cannot be started at all.

    This means the environment itself is broken (missing executable,
    permission denied) and the whole run is aborted.
    """

    pass


# 🔼⚙️

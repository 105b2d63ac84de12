from __future__ import annotations

class ConfigurationError(ValueError):
    """Invalid parameters given when building a value or generator."""

    parameter: str

    def __init__(self, parameter: str, message: str) -> None:
        self.parameter = parameter
        super().__init__(f"{parameter}: {message}")

class MissingValueError(LookupError):
    """A value was requested from something that holds none."""

    def __init__(self, message: str = "value requested from an empty container") -> None:
        super().__init__(message)

class RetriesExhaustedError(RuntimeError):
    """NonRepeating gave up after max_retries rejected draws."""

    retries: int

    def __init__(self, retries: int) -> None:
        self.retries = retries
        super().__init__(f"No acceptable value after {retries} rejected draws")

__all__ = ("ConfigurationError", "MissingValueError", "RetriesExhaustedError")

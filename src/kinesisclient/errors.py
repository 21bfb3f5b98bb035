from typing import Any, Optional


class InvalidArgumentError(ValueError):
    """
    Raised when a configuration value is rejected (empty string, non-positive
    number, wrong type).

    The configuration is never left half-updated: when this is raised by an
    override, the targeted field keeps its previous value.
    """

    def __init__(self, field: str, value: Any = None, reason: Optional[str] = None):
        self.field = field
        """Name of the configuration field that was rejected."""
        self.value = value
        """The rejected value."""
        msg = f"Invalid value for '{field}': {value!r}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)

"""Custom exceptions for Blockwrap services."""


class InvalidCapacityError(ValueError):
    """Raised when a capacity value typed by the user is not a number.

    The engine never sees such values: the input boundary rejects them and
    keeps the previous valid setting.

    Attributes:
        field: Name of the capacity field being edited
        raw_value: The rejected input, verbatim
    """

    def __init__(self, field: str, raw_value: str):
        """Initialize InvalidCapacityError.

        Args:
            field: Name of the capacity field being edited
            raw_value: The rejected input, verbatim
        """
        self.field = field
        self.raw_value = raw_value
        super().__init__(f"{field} must be a whole number, got {raw_value!r}")


class ClipboardError(Exception):
    """Raised by a clipboard sink when the system clipboard cannot be written."""

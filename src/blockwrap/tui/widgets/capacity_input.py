"""CapacityInput widget for the two numeric capacity settings.

Typed values are checked when the user presses Enter or leaves the field.
Anything that is not a whole number is rejected and the previous value is put
back; numbers are passed on unchanged and clamped by the engine.
"""

from textual.message import Message
from textual.widgets import Input
import structlog

from blockwrap.services.exceptions import InvalidCapacityError

logger = structlog.get_logger()


def parse_capacity(field: str, raw_value: str) -> int:
    """
    Parse a typed capacity value.

    Args:
        field: Name of the capacity field (for the error message)
        raw_value: Text typed by the user

    Returns:
        The value as an integer (not yet clamped)

    Raises:
        InvalidCapacityError: If raw_value is not a whole number
    """
    try:
        return int(raw_value.strip())
    except ValueError as e:
        raise InvalidCapacityError(field, raw_value) from e


class CapacityInput(Input):
    """Single-line numeric input bound to one capacity field."""

    DEFAULT_CSS = """
    CapacityInput {
        width: 12;
    }
    """

    class CapacityChanged(Message):
        """Posted when a valid, different value is entered."""

        def __init__(self, field: str, value: int) -> None:
            """Initialize message.

            Args:
                field: Capacity field name ("line_capacity" or "block_capacity")
                value: Parsed value, before clamping
            """
            super().__init__()
            self.field = field
            self.value = value

    def __init__(self, field: str, value: int, *args, **kwargs):
        """Initialize CapacityInput.

        Args:
            field: Capacity field this input controls
            value: Current (clamped) value
        """
        super().__init__(str(value), *args, **kwargs)
        self.field = field
        self.accepted_value = value

    def show_value(self, value: int) -> None:
        """Display the value the engine actually uses."""
        self.accepted_value = value
        self.value = str(value)

    def _apply(self) -> None:
        try:
            value = parse_capacity(self.field, self.value)
        except InvalidCapacityError as e:
            logger.warning("capacity_input_rejected", field=e.field, raw_value=e.raw_value)
            self.value = str(self.accepted_value)
            return

        if value != self.accepted_value:
            self.post_message(self.CapacityChanged(self.field, value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Apply the value on Enter."""
        event.stop()
        self._apply()

    def on_blur(self) -> None:
        """Apply the value when focus leaves the field."""
        self._apply()

"""Floating meaning panel state."""

from dataclasses import dataclass, field

from wordpicker.constants import (
    DEFAULT_PANEL_X,
    DEFAULT_PANEL_Y,
    PANEL_MINIMIZED_WIDTH,
    PANEL_WIDTH,
)
from wordpicker.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class PanelPosition(ValueObject):
    """Pixel offset of the panel's top-left corner."""

    x: int
    y: int

    def offset_from(self, x: int, y: int) -> "PanelPosition":
        """Vector from this position to the pointer at (x, y)."""
        return PanelPosition(x=x - self.x, y=y - self.y)


@dataclass
class PanelState:
    """
    Position, drag and minimize state of the floating panel.

    Owned by a single picker session and discarded with it. Dragging and
    minimizing are independent of each other.
    """

    position: PanelPosition = field(
        default_factory=lambda: PanelPosition(x=DEFAULT_PANEL_X, y=DEFAULT_PANEL_Y)
    )
    minimized: bool = False
    dragging: bool = False
    drag_offset: PanelPosition = field(default_factory=lambda: PanelPosition(x=0, y=0))

    @property
    def width(self) -> int:
        return PANEL_MINIMIZED_WIDTH if self.minimized else PANEL_WIDTH

    def press(self, x: int, y: int, *, in_content: bool = False) -> bool:
        """
        Start a drag at pointer (x, y).

        Presses inside the content region never start a drag, so the
        content can be scrolled and clicked.

        Returns:
            True if a drag started
        """
        if in_content:
            return False
        self.dragging = True
        self.drag_offset = self.position.offset_from(x, y)
        return True

    def move(self, x: int, y: int) -> bool:
        """Follow the pointer while dragging. Returns True if the panel moved."""
        if not self.dragging:
            return False
        self.position = PanelPosition(x=x - self.drag_offset.x, y=y - self.drag_offset.y)
        return True

    def release(self) -> None:
        self.dragging = False

    def toggle_minimized(self) -> bool:
        self.minimized = not self.minimized
        return self.minimized

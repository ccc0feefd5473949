"""Interactive controls: buttons, check boxes, sliders, text fields, choosers.

An interactor with a non-empty action command posts a ``GActionEvent`` when
it is activated.
"""

from __future__ import annotations

from cslib.gevents import EventQueue, EventType, GActionEvent, default_queue
from cslib.gobjects import GResizable

__all__ = [
    "GInteractor",
    "GButton",
    "GCheckBox",
    "GSlider",
    "GTextField",
    "GChooser",
]

# Nominal sizes used to lay out interactors without a rendering back end.
_CHAR_WIDTH = 7.0
_CONTROL_HEIGHT = 25.0


class GInteractor(GResizable):
    """Base of all interactors."""

    def __init__(self, width: float, height: float) -> None:
        super().__init__(0.0, 0.0, width, height)
        self.action_command = ""

    def activate(self, queue: EventQueue | None = None) -> GActionEvent | None:
        """Post an action event if the action command is set, and return it."""
        if not self.action_command:
            return None
        event = GActionEvent(EventType.ACTION_PERFORMED, self, self.action_command)
        (queue if queue is not None else default_queue).post(event)
        return event


class GButton(GInteractor):
    """An onscreen button whose action command starts as its label."""

    def __init__(self, label: str) -> None:
        super().__init__(max(60.0, len(label) * _CHAR_WIDTH + 30.0), _CONTROL_HEIGHT)
        self.label = label
        self.action_command = label


class GCheckBox(GInteractor):
    """A check box; clicking toggles the selection.  No action command is set."""

    def __init__(self, label: str) -> None:
        super().__init__(len(label) * _CHAR_WIDTH + 25.0, _CONTROL_HEIGHT)
        self.label = label
        self.selected = False

    def activate(self, queue: EventQueue | None = None) -> GActionEvent | None:
        """Toggle the selection, then post an action event if one is set."""
        self.selected = not self.selected
        return super().activate(queue)


class GSlider(GInteractor):
    """A horizontal slider whose value is kept within ``[minimum, maximum]``."""

    def __init__(self, minimum: int = 0, maximum: int = 100, value: int = 50) -> None:
        if minimum > maximum:
            raise ValueError("slider minimum exceeds maximum")
        super().__init__(200.0, _CONTROL_HEIGHT)
        self.minimum = int(minimum)
        self.maximum = int(maximum)
        self._value = self.minimum
        self.value = value

    @property
    def value(self) -> int:
        """The current value of the slider."""
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = max(self.minimum, min(self.maximum, int(value)))


class GTextField(GInteractor):
    """A field for entering a short line of text."""

    def __init__(self, n_chars: int = 10) -> None:
        if n_chars <= 0:
            raise ValueError("text field must hold at least one character")
        super().__init__(n_chars * _CHAR_WIDTH + 10.0, _CONTROL_HEIGHT)
        self.n_chars = n_chars
        self.text = ""


class GChooser(GInteractor):
    """A selectable list of items; the first item added is selected."""

    def __init__(self) -> None:
        super().__init__(120.0, _CONTROL_HEIGHT)
        self.items: list[str] = []
        self._selected: str | None = None

    @property
    def selected_item(self) -> str | None:
        """The item currently shown, or None if the chooser is empty."""
        return self._selected

    def add_item(self, item: str) -> None:
        """Add an item to the end of the list."""
        self.items.append(item)
        if self._selected is None:
            self._selected = item

    def set_selected_item(self, item: str) -> None:
        """Show ``item``; nothing changes if it is not in the list."""
        if item in self.items:
            self._selected = item
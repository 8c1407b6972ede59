# =============================================================================
# Session State and Messages
# =============================================================================
# The session is always in exactly one of three states:
#   - ListState:  the forward table is shown
#   - InputState: the two-field creation form is shown
#   - ErrorState: the last error is shown until a key is pressed
#
# Each state carries its own payload, so the error only exists while the
# ErrorState does.
#
# Messages are the inputs of the state machine: key presses and resizes.
# Key names follow Textual's naming ("enter", "escape", "ctrl+c", "a").
# =============================================================================

import textwrap
from dataclasses import dataclass, field
from enum import Enum, auto

from fnf_tui.session.components import TextField


# =============================================================================
# Messages
# =============================================================================

@dataclass(frozen=True)
class KeyPress:
    """
    A key press.

    Attributes:
        key: Key name, e.g. "enter", "tab", "a", "ctrl+c".
        character: Printable character produced by the key, if any. When
                   omitted, a single-character key name is used.
    """
    key: str
    character: str | None = None

    @property
    def text(self) -> str | None:
        """The printable text this key inserts, if any."""
        if self.character is not None:
            return self.character if self.character.isprintable() else None
        if len(self.key) == 1 and self.key.isprintable():
            return self.key
        if self.key == "space":
            return " "
        return None


@dataclass(frozen=True)
class Resize:
    """The terminal viewport changed size."""
    width: int
    height: int = 0


Message = KeyPress | Resize


class Command(Enum):
    """Instructions returned to the application by the controller."""
    QUIT = auto()


# =============================================================================
# States
# =============================================================================

@dataclass
class InputForm:
    """
    The rule creation form: source local part and destination address.

    Attributes:
        fields: Field 0 is the local part, field 1 the destination.
        active: Index of the field receiving keystrokes.
    """
    fields: list[TextField] = field(default_factory=lambda: [
        TextField(placeholder="Email prefix", char_limit=64),
        TextField(placeholder="Forward email", char_limit=254),
    ])
    active: int = 0

    @property
    def local_part(self) -> TextField:
        return self.fields[0]

    @property
    def destination(self) -> TextField:
        return self.fields[1]

    @property
    def active_field(self) -> TextField:
        return self.fields[self.active]

    def switch(self) -> None:
        """Move to the next field, wrapping around."""
        self.active = (self.active + 1) % len(self.fields)

    def reset(self, default_email: str) -> None:
        """Clear the local part and seed the destination with the default."""
        self.local_part.reset()
        self.destination.set_value(default_email)

    def values(self) -> tuple[str, str]:
        """Both values with surrounding whitespace removed."""
        return self.local_part.value.strip(), self.destination.value.strip()


@dataclass(frozen=True)
class ListState:
    """The forward table is displayed."""


@dataclass
class InputState:
    """The creation form is displayed."""
    form: InputForm


@dataclass
class ErrorState:
    """
    An error is displayed.

    Attributes:
        error: The error that caused the transition.
        width: Viewport width the message is wrapped to.
    """
    error: Exception
    width: int

    @property
    def message(self) -> str:
        return str(self.error) or type(self.error).__name__

    def lines(self) -> list[str]:
        """
        The message wrapped to the viewport width.

        Breaks at whitespace first; a word longer than the width is split.
        """
        return textwrap.wrap(
            self.message,
            width=max(self.width, 1),
            break_on_hyphens=False,
        )


SessionState = ListState | InputState | ErrorState


# =============================================================================
# Per-session Configuration
# =============================================================================

@dataclass(frozen=True)
class KeyMap:
    """Key bindings of the session. Each action accepts several keys."""
    quit: tuple[str, ...] = ("q", "ctrl+c")
    toggle_focus: tuple[str, ...] = ("escape",)
    create_random: tuple[str, ...] = ("n",)
    copy: tuple[str, ...] = ("c",)
    add: tuple[str, ...] = ("a",)
    delete: tuple[str, ...] = ("d",)
    switch_field: tuple[str, ...] = ("tab", "up", "down")
    confirm: tuple[str, ...] = ("enter",)
    cancel: tuple[str, ...] = ("escape",)


@dataclass(frozen=True)
class SessionStyle:
    """
    Visual settings of the session, as Rich style strings.

    Attributes:
        focused: Style of the active field.
        blurred: Style of inactive fields.
        cursor: Style of the active field's cursor.
        table_height: Number of visible table rows.
        top_margin: Blank lines above the rendered view.
    """
    focused: str = "color(205)"
    blurred: str = ""
    cursor: str = "color(205)"
    table_height: int = 7
    top_margin: int = 1

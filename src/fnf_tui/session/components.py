# =============================================================================
# Session Components
# =============================================================================
# Plain models for the two interactive pieces of the session:
#   - Table: rows, cursor, focus flag and key-driven navigation
#   - TextField: single-line input with value, focus/blur and styles
#
# The controller mutates these; Textual widgets only render them.
# =============================================================================

from dataclasses import dataclass, field
from typing import ClassVar

from fnf_tui.core import Row


@dataclass
class Table:
    """
    Rows shown in the forward list, with cursor and focus.

    While blurred, navigation keys are ignored. Data is never affected by
    focus.

    Attributes:
        rows: Displayed (source, destination) rows.
        cursor: Index of the selected row (0 when empty).
        focused: Whether navigation keys move the cursor.
        height: Visible rows, used for page up/down.
        column_width: Width of each of the two columns.
    """
    rows: list[Row] = field(default_factory=list)
    cursor: int = 0
    focused: bool = True
    height: int = 7
    column_width: int = 40

    # Navigation keys -> handler name
    NAVIGATION: ClassVar[dict[str, str]] = {
        "up": "move_up",
        "k": "move_up",
        "down": "move_down",
        "j": "move_down",
        "pageup": "page_up",
        "b": "page_up",
        "pagedown": "page_down",
        "f": "page_down",
        "space": "page_down",
        "home": "goto_top",
        "g": "goto_top",
        "end": "goto_bottom",
        "G": "goto_bottom",
    }

    def set_rows(self, rows: list[Row]) -> None:
        """Replace all rows and clamp the cursor."""
        self.rows = list(rows)
        self._clamp()

    def selected_row(self) -> Row | None:
        """The row under the cursor, or None on an empty table."""
        if not self.rows:
            return None
        return self.rows[self.cursor]

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def toggle_focus(self) -> None:
        self.focused = not self.focused

    def resize(self, width: int) -> None:
        self.column_width = max(width // 2, 1)

    def handle_key(self, key: str) -> bool:
        """
        Apply a navigation key.

        Returns:
            True if the key is a navigation key (even when blurred).
        """
        name = self.NAVIGATION.get(key)
        if name is None:
            return False
        if self.focused:
            getattr(self, name)()
        return True

    # -------------------------------------------------------------------------
    # Cursor movement
    # -------------------------------------------------------------------------

    def move_up(self, n: int = 1) -> None:
        self.cursor -= n
        self._clamp()

    def move_down(self, n: int = 1) -> None:
        self.cursor += n
        self._clamp()

    def page_up(self) -> None:
        self.move_up(self.height)

    def page_down(self) -> None:
        self.move_down(self.height)

    def goto_top(self) -> None:
        self.cursor = 0

    def goto_bottom(self) -> None:
        self.cursor = max(len(self.rows) - 1, 0)

    def _clamp(self) -> None:
        self.cursor = min(max(self.cursor, 0), max(len(self.rows) - 1, 0))


@dataclass
class TextField:
    """
    A single-line text input.

    Attributes:
        placeholder: Hint shown when the value is empty.
        char_limit: Maximum number of characters (0 = unlimited).
        value: Current text.
        focused: Whether the field receives keystrokes.
        prompt_style: Rich style string for the prompt.
        text_style: Rich style string for the value.
        cursor_style: Rich style string for the cursor block.
        cursor_blink: Whether the cursor blinks.
    """
    placeholder: str = ""
    char_limit: int = 0
    value: str = ""
    focused: bool = False
    prompt: str = "> "
    prompt_style: str = ""
    text_style: str = ""
    cursor_style: str = ""
    cursor_blink: bool = False

    def set_value(self, value: str) -> None:
        if self.char_limit:
            value = value[: self.char_limit]
        self.value = value

    def reset(self) -> None:
        self.value = ""

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def set_style(self, style: str) -> None:
        """Apply one style to both prompt and text."""
        self.prompt_style = style
        self.text_style = style

    def handle_key(self, key: str, text: str | None = None) -> bool:
        """
        Edit the value. Ignored while blurred.

        Args:
            key: Key name ("backspace", "ctrl+u", "a", ...).
            text: Printable character produced by the key, if any.

        Returns:
            True if the value changed.
        """
        if not self.focused:
            return False
        if key == "backspace":
            if not self.value:
                return False
            self.value = self.value[:-1]
            return True
        if key == "ctrl+u":
            changed = bool(self.value)
            self.value = ""
            return changed
        if text:
            if self.char_limit and len(self.value) + len(text) > self.char_limit:
                return False
            self.value += text
            return True
        return False

# =============================================================================
# Field View Widget
# =============================================================================
# Renders a TextField model as a single line:
#
#   > value█
#
# The active field gets the focused style and a blinking cursor block; an
# empty field shows its placeholder dimmed.
# =============================================================================

from rich.style import Style
from rich.text import Text
from textual.widgets import Static

from fnf_tui.session import TextField


class FieldView(Static):
    """A one-line text field display."""

    DEFAULT_CSS = """
    FieldView {
        height: 1;
    }
    """

    def show(self, text_field: TextField) -> None:
        """Render the given field model."""
        self.update(self.render_field(text_field))

    @staticmethod
    def render_field(text_field: TextField) -> Text:
        """Build the Rich Text for a field."""
        text = Text(text_field.prompt, style=text_field.prompt_style)

        if text_field.value:
            text.append(text_field.value, style=text_field.text_style)
        elif not text_field.focused:
            text.append(text_field.placeholder, style="dim")

        if text_field.focused:
            cursor = Style.parse(text_field.cursor_style or "none") + Style(
                reverse=True, blink=text_field.cursor_blink
            )
            text.append(" ", style=cursor)
            if not text_field.value:
                text.append(text_field.placeholder, style="dim")

        return text

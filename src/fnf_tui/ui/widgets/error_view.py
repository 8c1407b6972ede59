# =============================================================================
# Error View Widget
# =============================================================================
# Shows the error of an ErrorState, wrapped to the viewport width.
# =============================================================================

from rich.text import Text
from textual.widgets import Static

from fnf_tui.session import ErrorState


class ErrorView(Static):
    """The wrapped error message."""

    DEFAULT_CSS = """
    ErrorView {
        color: $error;
    }
    """

    def show(self, state: ErrorState) -> None:
        # Plain Text: brackets in API errors are not markup
        self.update(Text("\n".join(state.lines())))

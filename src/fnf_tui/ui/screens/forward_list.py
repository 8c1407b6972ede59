# =============================================================================
# Forward List Screen
# =============================================================================
# The only screen of fnf-tui. It shows one of three views, depending on the
# session state:
#   - list:  the redirection table
#   - input: the two-field creation form
#   - error: the last error, until a key is pressed
#
# Every key and resize goes to the SessionController; the screen then
# re-renders the active view from the controller's models. No widget takes
# focus, so the screen sees every key first.
# =============================================================================

from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import ContentSwitcher, Static

from fnf_tui.session import (
    Command,
    ErrorState,
    InputState,
    KeyPress,
    ListState,
    Resize,
    SessionController,
)
from fnf_tui.ui.widgets import ErrorView, FieldView, ForwardTable

HELP_TEXT = (
    "a add • n random • c copy • d delete • esc focus • q quit"
)
INPUT_HELP_TEXT = "tab switch • enter create • esc cancel"


class ForwardListScreen(Screen):
    """
    Screen driving a SessionController.

    Views are children of a ContentSwitcher, keyed by state:
        ListState -> "list-view", InputState -> "input-view",
        ErrorState -> "error-view"
    """

    CSS = """
    #views {
        height: auto;
    }

    #input-view {
        height: auto;
    }

    #help-line {
        color: $text-muted;
        margin-top: 1;
    }
    """

    def __init__(self, controller: SessionController) -> None:
        """
        Initialize the screen.

        Args:
            controller: Session to display and drive.
        """
        super().__init__()
        self._controller = controller

    def compose(self) -> ComposeResult:
        with ContentSwitcher(initial="list-view", id="views"):
            yield ForwardTable(id="list-view")
            with Vertical(id="input-view"):
                for index in range(len(self._controller.form.fields)):
                    yield FieldView(id=f"field-{index}")
            yield ErrorView(id="error-view")
        yield Static(HELP_TEXT, id="help-line")

    def on_mount(self) -> None:
        self.query_one("#views").styles.margin = (
            self._controller.style.top_margin, 0, 0, 0
        )
        self.render_state()

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def on_key(self, event: events.Key) -> None:
        """Feed the key to the controller."""
        event.stop()
        event.prevent_default()

        character = event.character if event.is_printable else None
        command = self._controller.update(KeyPress(event.key, character))
        if command is Command.QUIT:
            self.app.exit()
            return
        self.render_state()

    def on_resize(self, event: events.Resize) -> None:
        self._controller.update(Resize(event.size.width, event.size.height))
        self.render_state()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render_state(self) -> None:
        """Show the view matching the controller's state."""
        switcher = self.query_one("#views", ContentSwitcher)
        help_line = self.query_one("#help-line", Static)
        state = self._controller.state

        match state:
            case ListState():
                self.query_one(ForwardTable).show(self._controller.table)
                switcher.current = "list-view"
                help_line.update(HELP_TEXT)
            case InputState(form=form):
                for index, text_field in enumerate(form.fields):
                    self.query_one(f"#field-{index}", FieldView).show(text_field)
                switcher.current = "input-view"
                help_line.update(INPUT_HELP_TEXT)
            case ErrorState():
                self.query_one(ErrorView).show(state)
                switcher.current = "error-view"
                help_line.update("press any key")

# =============================================================================
# Forward Table Widget
# =============================================================================
# Renders the session's Table model: a two-column table of redirections
# (forward email, destination) with the cursor row highlighted.
#
# The widget never takes focus and never handles keys itself. The screen
# feeds every key to the controller, which moves the model's cursor; this
# widget just mirrors the model.
# =============================================================================

from textual import events
from textual.widgets import DataTable

from fnf_tui.core import COLUMNS, Row
from fnf_tui.session import Table


class ForwardTable(DataTable, can_focus=False):
    """
    A read-only view of the forward list.

    The "-blurred" class is set while the model is blurred, so the cursor
    row can be styled differently.
    """

    DEFAULT_CSS = """
    ForwardTable {
        height: auto;
    }

    ForwardTable > .datatable--header {
        text-style: bold;
    }

    ForwardTable.-blurred > .datatable--cursor {
        background: $panel;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.cursor_type = "row"
        self._shown_rows: list[Row] | None = None
        self._shown_width: int | None = None

    def on_click(self, event: events.Click) -> None:
        # The cursor belongs to the session model
        event.prevent_default()

    def show(self, table: Table) -> None:
        """
        Mirror a Table model.

        Rows and columns are rebuilt only when they changed.

        Args:
            table: The model to display.
        """
        if table.column_width != self._shown_width:
            self.clear(columns=True)
            for label in COLUMNS:
                self.add_column(label, width=table.column_width)
            self._shown_width = table.column_width
            self._shown_rows = None

        if table.rows != self._shown_rows:
            self.clear()
            for source, destination in table.rows:
                self.add_row(source, destination)
            self._shown_rows = list(table.rows)

        self.styles.max_height = table.height + 1  # rows + header
        if table.rows:
            self.move_cursor(row=table.cursor)
        self.set_class(not table.focused, "-blurred")

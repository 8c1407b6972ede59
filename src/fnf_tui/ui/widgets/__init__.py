# =============================================================================
# UI Widgets
# =============================================================================
# Views of the session models:
#   - ForwardTable: the redirection table
#   - FieldView: one line of the creation form
#   - ErrorView: the wrapped error message
# =============================================================================

from fnf_tui.ui.widgets.error_view import ErrorView
from fnf_tui.ui.widgets.field_view import FieldView
from fnf_tui.ui.widgets.forward_table import ForwardTable

__all__ = ["ForwardTable", "FieldView", "ErrorView"]

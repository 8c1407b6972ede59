# =============================================================================
# UI Module
# =============================================================================
# Textual-based user interface for fnf-tui.
#
# Structure:
#   - screens/: Full-screen views
#   - widgets/: Views of the session models
#
# The UI holds no state of its own: it renders the SessionController's
# models and forwards events to it.
# =============================================================================

from fnf_tui.ui.screens.forward_list import ForwardListScreen
from fnf_tui.ui.widgets.error_view import ErrorView
from fnf_tui.ui.widgets.field_view import FieldView
from fnf_tui.ui.widgets.forward_table import ForwardTable

__all__ = [
    "ForwardListScreen",
    "ForwardTable",
    "FieldView",
    "ErrorView",
]

# =============================================================================
# UI Screens
# =============================================================================
# Full-screen views for the application.
#
#   - ForwardListScreen: table, creation form and error views of a session
# =============================================================================

from fnf_tui.ui.screens.forward_list import ForwardListScreen

__all__ = ["ForwardListScreen"]

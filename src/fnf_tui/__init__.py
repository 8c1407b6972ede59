# =============================================================================
# fnf-tui: Email Forwards from the Terminal
# =============================================================================
#
# fnf-tui manages the email redirections of an OVH-hosted domain from an
# interactive terminal table.
#
# Features:
#   - List redirections, newest first
#   - Create a redirection, or a throwaway one with a random source
#   - Copy a destination address to the clipboard
#   - Delete the selected redirection
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "fnf-tui"

# Main entry point - this is what gets called by the 'fnf-tui' command
from fnf_tui.app import main

__all__ = ["main", "__version__", "__app_name__"]

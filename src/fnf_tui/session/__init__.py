# =============================================================================
# Session Module
# =============================================================================
# The interactive session, independent of the terminal toolkit:
#   - SessionController: List/Input/Error state machine
#   - Table, TextField: models rendered by the UI widgets
#   - KeyPress, Resize: the messages the controller consumes
# =============================================================================

from fnf_tui.session.components import Table, TextField
from fnf_tui.session.controller import SessionController
from fnf_tui.session.state import (
    Command,
    ErrorState,
    InputForm,
    InputState,
    KeyMap,
    KeyPress,
    ListState,
    Resize,
    SessionState,
    SessionStyle,
)

__all__ = [
    "SessionController",
    "Table",
    "TextField",
    "Command",
    "ErrorState",
    "InputForm",
    "InputState",
    "KeyMap",
    "KeyPress",
    "ListState",
    "Resize",
    "SessionState",
    "SessionStyle",
]

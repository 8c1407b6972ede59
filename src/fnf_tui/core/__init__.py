# =============================================================================
# fnf-tui Core Module
# =============================================================================
# Pure domain models with no external dependencies:
#   - ForwardingRule: one source -> destination redirection
#   - create_rows: projection of rules to display rows
# =============================================================================

from fnf_tui.core.projection import COLUMNS, Row, create_rows
from fnf_tui.core.rule import ForwardingRule

__all__ = [
    "ForwardingRule",
    "Row",
    "COLUMNS",
    "create_rows",
]

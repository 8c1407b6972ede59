# =============================================================================
# Row Projection
# =============================================================================
# Maps provider records to table rows. Column order is fixed:
#   (source address, destination address)
# Row order is the provider's list order (newest first).
# =============================================================================

from typing import Iterable

from fnf_tui.core.rule import ForwardingRule

# A displayed table row: (source, destination)
Row = tuple[str, str]

# Column titles, in row order
COLUMNS = ("Forward email", "Destination")


def create_rows(rules: Iterable[ForwardingRule]) -> list[Row]:
    """Project rules to display rows, preserving order."""
    return [(rule.source, rule.destination) for rule in rules]

# =============================================================================
# fnf-tui Entry Point for `python -m fnf_tui`
# =============================================================================
# Equivalent to running the 'fnf-tui' command after installation.
# =============================================================================

import sys

from fnf_tui.app import main

if __name__ == "__main__":
    sys.exit(main())

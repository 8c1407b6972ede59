# =============================================================================
# Forward Module
# =============================================================================
# Remote management of email redirections.
#
# Features:
#   - Create (with retry), list (newest first) and delete redirections
#   - Random source generation for throwaway addresses
# =============================================================================

from fnf_tui.forward.provider import (
    ForwardProvider,
    OVHProvider,
    ForwardError,
    ForwardCreateError,
    ForwardListError,
    ForwardDeleteError,
    generate_local_part,
)

__all__ = [
    "ForwardProvider",
    "OVHProvider",
    "ForwardError",
    "ForwardCreateError",
    "ForwardListError",
    "ForwardDeleteError",
    "generate_local_part",
]

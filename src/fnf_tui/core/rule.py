# =============================================================================
# Forwarding Rule Model
# =============================================================================
# A forwarding rule ("redirection" in OVH terms) maps a source mailbox on the
# managed domain to a destination address.
#
# Rules are never mutated locally. They are created remotely (the API returns
# no body, so the id is only known after listing again), read in bulk, and
# deleted by id.
# =============================================================================

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ForwardingRule:
    """
    A single forwarding rule as returned by the provider.

    Attributes:
        source: Fully qualified source address (``local@domain``). Unique
                within a domain, enforced by the provider.
        destination: Address the mail is delivered to.
        id: Opaque identifier assigned by the provider on creation. Empty
            for a rule that has not been created yet. Required for deletion.

    Example:
        >>> rule = ForwardingRule(source="shop@example.com", destination="me@example.org")
        >>> rule.local_part
        'shop'
    """

    source: str
    destination: str
    id: str = ""

    @property
    def local_part(self) -> str:
        """The mailbox part of the source address, before ``@``."""
        return self.source.partition("@")[0]

    @property
    def domain(self) -> str:
        """The domain part of the source address."""
        return self.source.partition("@")[2]

    @classmethod
    def from_api(cls, record: dict[str, Any]) -> "ForwardingRule":
        """
        Build a rule from a provider record.

        OVH returns ``{"id": ..., "from": ..., "to": ...}``; extra keys
        (like ``localCopy`` on some API versions) are ignored.
        """
        return cls(
            source=record.get("from", ""),
            destination=record.get("to", ""),
            id=str(record.get("id") or ""),
        )

    def __str__(self) -> str:
        return f"{self.source} -> {self.destination}"

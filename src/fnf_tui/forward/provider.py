# =============================================================================
# OVH Forwarding Provider
# =============================================================================
# Creates, lists and deletes email redirections on an OVH-hosted domain.
#
# Key responsibilities:
#   - Building redirection requests for the configured domain
#   - Retrying creation on transient failures (3 attempts, 2s apart)
#   - Two-phase listing: ids first, then one detail request per id
#   - Wrapping API errors into the ForwardError hierarchy
#
# Uses the official `ovh` client for request signing and endpoint selection.
# Nothing is cached: every list() is a fresh set of round trips.
# =============================================================================

import logging
import random
import time
from typing import TYPE_CHECKING, Any, Callable, Protocol

import ovh
from ovh.exceptions import APIError

from fnf_tui.core import ForwardingRule

if TYPE_CHECKING:
    from fnf_tui.config import Config

logger = logging.getLogger(__name__)

# Alphabet and length of generated local parts
LOCAL_PART_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"
LOCAL_PART_LENGTH = 4


class APIClient(Protocol):
    """The subset of `ovh.Client` the provider relies on."""

    def get(self, _target: str, **kwargs: Any) -> Any: ...

    def post(self, _target: str, **kwargs: Any) -> Any: ...

    def delete(self, _target: str, **kwargs: Any) -> Any: ...


class ForwardProvider(Protocol):
    """
    Remote forwarding operations consumed by the session controller.

    Every method raises a ForwardError subclass on failure. The controller
    only distinguishes success from failure, never the error kind.
    """

    def create(self, local_part: str, destination: str) -> None: ...

    def create_on_default_email(self) -> str: ...

    def list(self) -> list[ForwardingRule]: ...

    def delete(self, rule_id: str) -> None: ...


def generate_local_part(
    rng: random.Random,
    length: int = LOCAL_PART_LENGTH,
) -> str:
    """
    Generate a random mailbox local part.

    Args:
        rng: Randomness source. Pass a seeded `random.Random` for
             reproducible output.
        length: Number of characters.

    Returns:
        Lowercase alphanumeric string of the given length.
    """
    return "".join(rng.choice(LOCAL_PART_ALPHABET) for _ in range(length))


class OVHProvider:
    """
    Forwarding provider backed by the OVH email-domain API.

    Usage:
        >>> provider = OVHProvider.from_config(config)
        >>> provider.create("shop", "me@example.org")
        >>> for rule in provider.list():
        ...     print(rule)

    Attributes:
        domain: Domain the redirections live on.
        default_email: Destination used by create_on_default_email().
    """

    # Creation retry policy
    CREATE_ATTEMPTS = 3
    RETRY_DELAY = 2.0  # seconds between attempts

    def __init__(
        self,
        client: APIClient,
        domain: str,
        default_email: str,
        *,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize the provider.

        Args:
            client: Signed API client (normally an `ovh.Client`).
            domain: Mail domain, e.g. "example.com".
            default_email: Default destination for random rules.
            rng: Randomness source for generated local parts. Defaults to
                 an OS-seeded generator.
            sleep: Called with the retry delay between create attempts.
        """
        self._client = client
        self.domain = domain
        self.default_email = default_email
        self._rng = rng or random.SystemRandom()
        self._sleep = sleep

    @classmethod
    def from_config(cls, config: "Config") -> "OVHProvider":
        """
        Build a provider with a real OVH client from resolved configuration.

        Raises:
            ForwardError: If the client can't be created (e.g. unknown endpoint).
        """
        try:
            client = ovh.Client(
                endpoint=config.ovh.endpoint,
                application_key=config.ovh.app_key,
                application_secret=config.ovh.app_secret,
                consumer_key=config.ovh.consumer_key,
            )
        except APIError as e:
            raise ForwardError(f"Cannot create OVH client: {e}") from e
        return cls(client, config.ovh.domain, config.forward.default_email)

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    @property
    def _collection_path(self) -> str:
        return f"/email/domain/{self.domain}/redirection"

    def _item_path(self, rule_id: str) -> str:
        return f"{self._collection_path}/{rule_id}"

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def create(self, local_part: str, destination: str) -> None:
        """
        Create a redirection from ``local_part@domain`` to ``destination``.

        Retried up to CREATE_ATTEMPTS times with RETRY_DELAY seconds between
        attempts. The first success stops the loop.

        Raises:
            ForwardCreateError: If the last attempt fails.
        """
        source = f"{local_part}@{self.domain}"
        body = {"from": source, "to": destination, "localCopy": False}

        last_error: APIError | None = None
        for attempt in range(1, self.CREATE_ATTEMPTS + 1):
            if attempt > 1:
                self._sleep(self.RETRY_DELAY)
            logger.debug(f"POST {self._collection_path} ({source} -> {destination}), attempt {attempt}")
            try:
                self._client.post(self._collection_path, **body)
            except APIError as e:
                last_error = e
                logger.warning(
                    f"Creating {source} failed (attempt {attempt}/{self.CREATE_ATTEMPTS}): {e}"
                )
                continue
            logger.info(f"Created redirection {source} -> {destination}")
            return

        raise ForwardCreateError(
            f"Failed to create {source} after {self.CREATE_ATTEMPTS} attempts: {last_error}"
        ) from last_error

    def create_on_default_email(self) -> str:
        """
        Create a redirection with a random local part to the default email.

        Returns:
            The generated local part.

        Raises:
            ForwardCreateError: If creation fails.
        """
        local_part = generate_local_part(self._rng)
        self.create(local_part, self.default_email)
        return local_part

    def list(self) -> list[ForwardingRule]:
        """
        Fetch every redirection of the domain, newest first.

        The API only lists ids, so each rule costs one extra round trip.
        A failure on any request aborts the whole call.

        Returns:
            Rules in reverse of the API's id order.

        Raises:
            ForwardListError: If any request fails.
        """
        try:
            logger.debug(f"GET {self._collection_path}")
            ids = self._client.get(self._collection_path) or []

            rules = []
            for rule_id in ids:
                logger.debug(f"GET {self._item_path(rule_id)}")
                rules.append(ForwardingRule.from_api(self._client.get(self._item_path(rule_id))))
        except APIError as e:
            raise ForwardListError(f"Failed to list redirections of {self.domain}: {e}") from e

        rules.reverse()
        logger.debug(f"Listed {len(rules)} redirections")
        return rules

    def delete(self, rule_id: str) -> None:
        """
        Delete a redirection by id. Not retried.

        Raises:
            ForwardDeleteError: If the request fails.
        """
        logger.debug(f"DELETE {self._item_path(rule_id)}")
        try:
            self._client.delete(self._item_path(rule_id))
        except APIError as e:
            raise ForwardDeleteError(f"Failed to delete redirection {rule_id}: {e}") from e
        logger.info(f"Deleted redirection {rule_id}")


# =============================================================================
# Exceptions
# =============================================================================

class ForwardError(Exception):
    """Base exception for forwarding operations."""
    pass


class ForwardCreateError(ForwardError):
    """Raised when a redirection can't be created."""
    pass


class ForwardListError(ForwardError):
    """Raised when redirections can't be listed."""
    pass


class ForwardDeleteError(ForwardError):
    """Raised when a redirection can't be deleted."""
    pass

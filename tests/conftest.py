# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the fnf-tui test suite:
#   - FakeAPIClient: stands in for ovh.Client, records every call
#   - FakeProvider: in-memory forwarding provider for session tests
# =============================================================================

import random

import pytest
from ovh.exceptions import APIError

from fnf_tui.core import ForwardingRule
from fnf_tui.forward import (
    ForwardCreateError,
    ForwardDeleteError,
    ForwardListError,
    OVHProvider,
)
from fnf_tui.session import SessionController

DOMAIN = "test.xyz"
DEFAULT_EMAIL = "whatever@test.com"


class FakeAPIClient:
    """
    Records calls and answers from a path -> response table.

    A response that is an exception instance is raised instead of returned.
    post_failures makes the first N posts raise APIError.
    """

    def __init__(self, responses=None, post_failures=0):
        self.responses = responses or {}
        self.post_failures = post_failures
        self.calls = []

    def get(self, _target, **kwargs):
        self.calls.append(("GET", _target, kwargs))
        response = self.responses[_target]
        if isinstance(response, Exception):
            raise response
        return response

    def post(self, _target, **kwargs):
        self.calls.append(("POST", _target, kwargs))
        if self.post_failures:
            self.post_failures -= 1
            raise APIError("an error occurred")
        return None

    def delete(self, _target, **kwargs):
        self.calls.append(("DELETE", _target, kwargs))
        response = self.responses.get(("DELETE", _target))
        if isinstance(response, Exception):
            raise response
        return None

    def calls_to(self, method):
        return [call for call in self.calls if call[0] == method]


class FakeProvider:
    """
    In-memory provider with the OVHProvider contract.

    Rules are kept in creation order; list() returns them newest first.
    Set fail_create / fail_list / fail_delete to make the next calls raise.
    """

    def __init__(self, rules=None, domain=DOMAIN, default_email=DEFAULT_EMAIL):
        self.domain = domain
        self.default_email = default_email
        self._rules = list(rules or [])
        self._next_id = len(self._rules) + 1
        self.fail_create = False
        self.fail_list = False
        self.fail_delete = False
        self.created = []
        self.deleted = []
        self.list_calls = 0

    def add(self, local_part, destination):
        rule = ForwardingRule(
            source=f"{local_part}@{self.domain}",
            destination=destination,
            id=str(self._next_id),
        )
        self._next_id += 1
        self._rules.append(rule)
        return rule

    def create(self, local_part, destination):
        self.created.append((local_part, destination))
        if self.fail_create:
            raise ForwardCreateError("create failed")
        self.add(local_part, destination)

    def create_on_default_email(self):
        local_part = f"r{len(self.created):03d}"
        self.create(local_part, self.default_email)
        return local_part

    def list(self):
        self.list_calls += 1
        if self.fail_list:
            raise ForwardListError("list failed because the remote service answered with an error")
        return list(reversed(self._rules))

    def delete(self, rule_id):
        self.deleted.append(rule_id)
        if self.fail_delete:
            raise ForwardDeleteError("delete failed")
        self._rules = [rule for rule in self._rules if rule.id != rule_id]

    def remove_behind_our_back(self, source):
        self._rules = [rule for rule in self._rules if rule.source != source]


@pytest.fixture
def api_client():
    """An empty fake OVH client."""
    return FakeAPIClient()


@pytest.fixture
def sleeps():
    """Records the delays passed to the provider's sleep."""
    return []


@pytest.fixture
def ovh_provider(api_client, sleeps):
    """An OVHProvider over the fake client with a seeded generator."""
    return OVHProvider(
        api_client,
        DOMAIN,
        DEFAULT_EMAIL,
        rng=random.Random(42),
        sleep=sleeps.append,
    )


@pytest.fixture
def provider():
    """A fake provider holding two rules."""
    fake = FakeProvider()
    fake.add("first", "one@example.com")
    fake.add("second", "two@example.com")
    return fake


@pytest.fixture
def empty_provider():
    """A fake provider with no rules."""
    return FakeProvider()


@pytest.fixture
def clipboard():
    """Records every text written to the clipboard."""
    return []


@pytest.fixture
def make_controller(clipboard):
    """Factory building a SessionController over a provider."""
    def factory(provider, width=40):
        return SessionController(
            provider,
            DEFAULT_EMAIL,
            clipboard=clipboard.append,
            width=width,
        )
    return factory

"""
Global pytest configuration and fixtures for resolver-ops tests.
"""
import pytest
import structlog


class Greeter:
    """Sample service used across the tests."""

    def __init__(self, greeting: str = "hello"):
        self.greeting = greeting


class Repository:
    """Sample dependency with no constructor arguments."""


class StubResolver:
    """Dictionary-backed resolver keyed by (service, name, arguments)."""

    def __init__(self):
        self._registrations = {}
        self.calls = []

    def register(self, service, instance, name=None, arguments=()):
        self._registrations[(service, name, tuple(arguments))] = instance
        return instance

    def resolve(self, service, *arguments, **kwargs):
        self.calls.append((service, arguments, kwargs))
        return self._registrations.get((service, kwargs.get("name"), arguments))


class Echo:
    """What an echoing resolver returns: the key it was asked for."""

    def __init__(self, service, arguments, kwargs):
        self.service = service
        self.arguments = arguments
        self.kwargs = kwargs


class EchoResolver:
    """Resolver that hands back exactly what it received."""

    def resolve(self, service, *arguments, **kwargs):
        return Echo(service, arguments, kwargs)


@pytest.fixture
def stub_resolver() -> StubResolver:
    """Empty stub resolver for testing."""
    return StubResolver()


@pytest.fixture
def echo_resolver() -> EchoResolver:
    """Echoing resolver for testing argument forwarding."""
    return EchoResolver()


@pytest.fixture
def greeter() -> Greeter:
    """Sample greeter instance."""
    return Greeter()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep logging configuration from leaking between tests."""
    yield
    structlog.reset_defaults()

"""Pytest configuration for the datetok test suite.

Hypothesis profiles:
- dev: local development with 500 examples
- ci: 50 examples, derandomized
Select with HYPOTHESIS_PROFILE; CI=true picks "ci".
"""

import os

import pytest
from hypothesis import HealthCheck, Phase, settings

import datetok

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


@pytest.fixture(autouse=True)
def _isolated_defaults(monkeypatch):
    """Run every test against the built-in defaults, untouched by the environment."""
    monkeypatch.delenv("DATETOK_PREDICATE", raising=False)
    monkeypatch.delenv("DATETOK_DICTIONARY", raising=False)
    datetok.set_default_predicate("default")
    datetok.set_default_dictionary("standard")
    yield
    datetok.set_default_predicate("default")
    datetok.set_default_dictionary("standard")


class BrokenStream:
    """Readable that yields ``payload`` once, then fails."""

    def __init__(self, payload: bytes) -> None:
        self.payload = payload

    def read(self, size: int = -1) -> bytes:
        if self.payload:
            out, self.payload = self.payload, b""
            return out
        raise OSError("device unplugged")


@pytest.fixture
def broken_stream():
    """Return a factory for streams that fail after their payload is read."""
    return BrokenStream

"""Shared fixtures for load_state tests."""

from dataclasses import dataclass

import pytest

from load_state import Failed, Loading, Ready


@dataclass(frozen=True)
class Profile:
    """Small content type used by the decoding tests."""
    name: str
    age: int


@pytest.fixture
def profile_type():
    return Profile


@pytest.fixture
def empty_loading():
    return Loading()


@pytest.fixture
def stale_loading():
    return Loading(5)


@pytest.fixture
def ready():
    return Ready(5)


@pytest.fixture
def failed_with_content():
    return Failed("timeout", 5)


@pytest.fixture
def failed_without_content():
    return Failed("timeout")


@pytest.fixture(params=["empty_loading", "stale_loading", "ready", "failed_with_content", "failed_without_content"])
def any_state(request):
    """Each variant, with and without content."""
    return request.getfixturevalue(request.param)

import pytest

from passkeep.core.security import FastPasswordHasher
from passkeep.infrastructure.users import InMemoryUserStore


@pytest.fixture
def users() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def hasher() -> FastPasswordHasher:
    return FastPasswordHasher()

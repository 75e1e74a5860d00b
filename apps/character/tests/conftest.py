"""Pytest configuration for character tests."""

import pytest

from apps.character.tests.fakes import (
    FakePasswordHasher,
    FakeTransactionManager,
    InMemoryCharacterGateway,
    InMemoryEquipmentGateway,
)


@pytest.fixture
def characters() -> InMemoryCharacterGateway:
    return InMemoryCharacterGateway()


@pytest.fixture
def weapons() -> InMemoryEquipmentGateway:
    return InMemoryEquipmentGateway()


@pytest.fixture
def armors() -> InMemoryEquipmentGateway:
    return InMemoryEquipmentGateway()


@pytest.fixture
def skills() -> InMemoryEquipmentGateway:
    return InMemoryEquipmentGateway()


@pytest.fixture
def tx() -> FakeTransactionManager:
    return FakeTransactionManager()


@pytest.fixture
def hasher() -> FakePasswordHasher:
    return FakePasswordHasher()

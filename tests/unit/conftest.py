"""Unit test fixtures: fake SDK objects and an in-memory database."""

from __future__ import annotations

import pytest

from tao.core.config import AppSettings
from tests.fakes import FakeAction, FakeService, MemoryDatabase


@pytest.fixture
def database():
    return MemoryDatabase()


@pytest.fixture
def sdk_action():
    return FakeAction()


@pytest.fixture
def sdk_service():
    return FakeService()


@pytest.fixture
def settings():
    return AppSettings(database={"dsn": "dbname=tao_test"})

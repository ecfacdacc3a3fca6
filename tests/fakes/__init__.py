"""Shared test doubles: memory database and SDK fakes."""

from __future__ import annotations

from tao.persistence.memory_backend import MemoryDatabase
from tests.fakes.sdk import FakeAction, FakeParam, FakeService

__all__ = ["FakeAction", "FakeParam", "FakeService", "MemoryDatabase"]

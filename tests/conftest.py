"""Shared test fixtures."""

from dataclasses import dataclass, field
from typing import List

import pytest


@dataclass
class Address:
    city: str
    zip_code: str


@dataclass
class Person:
    name: str
    age: int
    address: Address
    tags: List[str] = field(default_factory=list)


@pytest.fixture
def people() -> List[dict]:
    """Fixture providing records with nested fields and a tied age."""
    return [
        {"name": "carol", "age": 41, "team": {"name": "ops", "rank": 2}},
        {"name": "alice", "age": 29, "team": {"name": "dev", "rank": 1}},
        {"name": "bob", "age": 35, "team": {"name": "dev", "rank": 1}},
        {"name": "dave", "age": 29, "team": {"name": "qa", "rank": 3}},
    ]


@pytest.fixture
def person_objects() -> List[Person]:
    """Fixture providing dataclass records resolved through attributes."""
    return [
        Person("zed", 50, Address("Oslo", "0150"), ["b"]),
        Person("amy", 20, Address("Bergen", "5003"), ["c"]),
        Person("kim", 33, Address("Aalesund", "6002"), ["a"]),
    ]


@pytest.fixture
def names():
    """Fixture returning a helper that lists the ``name`` of each record."""

    def _names(records) -> List[str]:
        return [r["name"] if isinstance(r, dict) else r.name for r in records]

    return _names

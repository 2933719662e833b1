"""
Test MongoDB/Beanie fixtures to verify they work correctly.

This file also serves as an example of how to use the fixtures.
"""

from uuid import uuid4

import pytest

from app.schemas import Church, NewsItem


def unique_id(prefix: str = "") -> str:
    """Generate a unique ID for test data to avoid collisions."""
    return f"{prefix}{uuid4().hex[:8]}"


async def test_beanie_initialized(beanie_db):
    """Verify Beanie is properly initialized with test database."""
    assert beanie_db is not None
    count = await Church.count()
    assert count >= 0


@pytest.mark.usefixtures("clear_collections")
async def test_insert_and_find(beanie_db):
    """Insert a record and read it back with timestamps filled in."""
    name = unique_id("St. Mary ")
    church = Church(name=name, address="Main Road")
    await church.insert()

    found = await Church.find_one(Church.name == name)
    assert found is not None
    assert found.created_at is not None
    assert found.to_out()["id"] == str(church.id)


@pytest.mark.usefixtures("clear_collections")
async def test_collections_start_empty(beanie_db):
    """Each test using clear_collections sees empty collections."""
    assert await NewsItem.count() == 0

"""Shared fixtures for the json-typegen test suite."""

import json

import pytest


@pytest.fixture
def person_data():
    """Flat object with a scalar array."""
    return {"name": "Alice", "age": 30, "tags": ["admin", "dev"]}


@pytest.fixture
def nested_data():
    """Object nesting an object that holds an array of objects."""
    return {
        "id": 7,
        "profile": {
            "displayName": "Ada",
            "links": [{"url": "https://example.com", "primary": True}],
        },
    }


@pytest.fixture
def renamed_data():
    """Keys that need renaming in most target languages."""
    return {"first_name": "Ada", "lastName": "Lovelace", "is-active": True}


@pytest.fixture
def json_file(tmp_path, person_data):
    """Write person_data to a JSON file and return its path."""
    path = tmp_path / "person.json"
    path.write_text(json.dumps(person_data), encoding="utf-8")
    return path


@pytest.fixture
def symbol_keys_data():
    """Keys that no case conversion turns into an identifier."""
    return {"@type": "Person", "$schema": "x", "2fa": True}

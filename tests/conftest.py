"""Test fixtures and configuration."""

import io
import json

import pytest


@pytest.fixture
def stream():
    """In-memory text stream to capture writer output."""
    return io.StringIO()


@pytest.fixture
def people():
    """Two uniform rows."""
    return [{"name": "Alice", "age": "25"}, {"name": "Bob", "age": "30"}]


@pytest.fixture
def people_json(tmp_path, people):
    """Path to a JSON file holding the people rows."""
    path = tmp_path / "people.json"
    path.write_text(json.dumps(people))
    return str(path)


@pytest.fixture
def people_yaml(tmp_path):
    """Path to a YAML file holding the people rows."""
    path = tmp_path / "people.yaml"
    path.write_text("- name: Alice\n  age: 25\n- name: Bob\n  age: 30\n")
    return str(path)

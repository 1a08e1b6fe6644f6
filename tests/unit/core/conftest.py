"""Shared fixtures for core unit tests"""

import pytest


LEFT_TEXT = """\
def greet(name):
    print("Hello, " + name)

greet("world")
"""

RIGHT_TEXT = """\
def greet(name, end):
    print("Hello, " + name + end)

# entry point
greet("world")
"""

LEFT_JSON = '{"name": "pairdiff", "version": 1, "tags": ["diff", "json"]}'

RIGHT_JSON = """\
{
  "tags": ["diff", "json", "text"],
  "version": 2,
  "name": "pairdiff"
}
"""


@pytest.fixture(name="left_text")
def left_text_fixture():
    return LEFT_TEXT


@pytest.fixture(name="right_text")
def right_text_fixture():
    return RIGHT_TEXT


@pytest.fixture(name="left_json")
def left_json_fixture():
    return LEFT_JSON


@pytest.fixture(name="right_json")
def right_json_fixture():
    return RIGHT_JSON

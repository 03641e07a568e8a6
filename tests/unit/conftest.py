"""
Unit test fixtures for pure functions and isolated components.

This module provides minimal fixtures for fast unit tests
that don't require external dependencies.
"""

import pytest
from faker import Faker

fake = Faker()
Faker.seed(1234)


@pytest.fixture
def prose_words() -> list[str]:
    """Plain words that no math rule matches."""
    words = []
    while len(words) < 12:
        word = fake.word()
        if word.isalpha() and word.lower() not in {
            "gcd", "sum", "lim", "min", "max", "log", "sin", "cos", "tan",
        }:
            words.append(word)
    return words


@pytest.fixture
def statement_uid() -> str:
    """Generate a statement uid for tests."""
    return f"stmt-{fake.uuid4()}"

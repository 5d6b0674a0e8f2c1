"""Shared fixtures for ssnkit tests."""

import random

import pytest


def make_sequence_rng(values):
    """Return an rng that yields values in order, then repeats the last one."""
    state = {"i": 0}

    def rng():
        value = values[min(state["i"], len(values) - 1)]
        state["i"] += 1
        return value

    return rng


@pytest.fixture
def seeded_rng():
    """Deterministic rng backed by random.Random."""
    return random.Random(1234).random


@pytest.fixture
def sequence_rng():
    """Factory for rngs that replay a fixed sequence."""
    return make_sequence_rng

"""Shared fixtures for Archery Pop tests."""

import os
import random

# Headless pygame for renderer and input tests
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from aps.highscore import MemoryHighScoreStore
from models import SessionConfig
from games.ArcheryPop.session import ArcheryPopSession


@pytest.fixture
def config():
    return SessionConfig()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def session(config, store, rng):
    return ArcheryPopSession(config, store, rng)


@pytest.fixture
def playing(session):
    """A started session with an empty pool, ready for hand-placed targets."""
    assert session.start("Robin")
    session.pool.clear()
    return session


@pytest.fixture
def make_session():
    """Factory for sessions with config overrides."""
    def _make(store=None, seed=1234, **overrides):
        return ArcheryPopSession(SessionConfig(**overrides), store or MemoryHighScoreStore(),
                                 random.Random(seed))
    return _make

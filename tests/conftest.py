"""Shared fixtures for the simulation tests."""
import pytest

from games.Hammer.config import HammerConfig
from games.Stacker.config import StackerConfig
from rectsim import logging as sim_logging


class ScriptedRandom:
    """RandomSource that replays fixed draws and records the call order.

    Running out of scripted values raises IndexError, so a test fails if
    the code under test draws more than expected.
    """

    def __init__(self, uniforms=(), flips=()):
        self.uniforms = list(uniforms)
        self.flips = list(flips)
        self.calls = []

    def uniform(self, a, b):
        self.calls.append('uniform')
        return self.uniforms.pop(0)

    def coin_flip(self):
        self.calls.append('coin_flip')
        return self.flips.pop(0)

    def seed(self, value):
        self.calls.append('seed')


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def hammer_config():
    """Default curve with frames long enough to step whole seconds."""
    return HammerConfig(max_frame_time=1.0)


@pytest.fixture
def stacker_config():
    """Default tower with frames long enough to step whole seconds."""
    return StackerConfig(max_frame_time=1.0)


@pytest.fixture
def logging_config():
    """Restore the global logging configuration after a test."""
    saved_default = sim_logging._config['default_level']
    saved_modules = dict(sim_logging._config['module_levels'])
    yield sim_logging._config
    sim_logging._config['default_level'] = saved_default
    sim_logging._config['module_levels'] = saved_modules

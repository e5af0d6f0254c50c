"""
Shared pytest fixtures for saosim tests.
"""

import logging
from pathlib import Path

import pytest

from saosim.data.actor_set import ActorSet
from saosim.data.behavior_data import BehaviorLongitudinalData


@pytest.fixture(scope="session")
def test_output_root() -> Path:
    """
    Root of the test_output directory, created once per session. Files
    written there are kept after the run for inspection.
    """
    output_dir = Path(__file__).parent.parent / "test_output"
    output_dir.mkdir(exist_ok=True)
    return output_dir


@pytest.fixture
def test_output_dir(request, test_output_root) -> Path:
    """
    Per-test output directory: test_output/<module_name>/<test_name>/
    """
    module_name = request.module.__name__.split(".")[-1]
    test_dir = test_output_root / module_name / request.node.name
    test_dir.mkdir(parents=True, exist_ok=True)
    return test_dir


@pytest.fixture(autouse=True)
def reset_saosim_logging():
    """Start and end every test with the library default: a lone
    NullHandler and an unset level on the saosim logger."""

    def _reset():
        logger = logging.getLogger("saosim")
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    _reset()
    yield
    _reset()


def make_behavior_data(rows, name="behavior", missing=None) -> BehaviorLongitudinalData:
    """Build a data object from per-observation rows of actor values.

    ``missing`` optionally lists ``(observation, actor)`` cells to flag.
    """
    actors = ActorSet(id=0, name="actors", n=len(rows[0]))
    data = BehaviorLongitudinalData(0, name, actors, len(rows))
    for observation, row in enumerate(rows):
        for actor, value in enumerate(row):
            data.set_value(observation, actor, value)
    for observation, actor in missing or []:
        data.set_missing(observation, actor, True)
    return data


@pytest.fixture
def two_by_two_data() -> BehaviorLongitudinalData:
    """Observations [1, 3] and [2, 4]: min 1, max 4, overall mean 2.5."""
    return make_behavior_data([[1, 3], [2, 4]])


@pytest.fixture
def behavior_data_factory():
    """The ``make_behavior_data`` helper, for tests needing custom rows."""
    return make_behavior_data

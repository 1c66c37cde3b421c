"""
Shared pytest fixtures for csgrid tests.
"""

import pytest
from pubsub import pub

from csgrid import topics
from csgrid.objects import ComponentNode, ComponentSetNode, SceneNode


@pytest.fixture(autouse=True)
def clean_bus():
    """Drop all bus subscriptions after each test."""
    yield
    pub.unsubAll()


@pytest.fixture
def make_variant():
    """Factory fixture for positioned variant nodes."""

    counter = {"n": 0}

    def _make(x, y, width=40, height=30, node_id=None):
        counter["n"] += 1
        return ComponentNode(node_id or f"v{counter['n']}", x, y, width, height)

    return _make


@pytest.fixture
def make_component_set():
    """Factory fixture for component sets with a few leftover styles."""

    def _make(node_id="set", children=None, resizable=True):
        return ComponentSetNode(
            node_id,
            width=500,
            height=400,
            children=children or [],
            corner_radius=4,
            strokes=[{"type": "SOLID", "color": "#9747FF"}],
            resizable=resizable,
        )

    return _make


@pytest.fixture
def scenario_variants(make_variant):
    """Three loosely placed variants forming two rows and two columns."""
    return [
        make_variant(0, 0, node_id="a"),
        make_variant(45, 5, node_id="b"),
        make_variant(0, 50, node_id="c"),
    ]


@pytest.fixture
def text_node():
    """A child without geometry."""
    return SceneNode("label", "TEXT", name="Label")


@pytest.fixture
def bus_recorder():
    """Records the events published by the arranger."""

    class Recorder:
        def __init__(self):
            self.notices = []
            self.started = []
            self.finished = []
            self.arranged = []
            self.skipped = []
            self.failed = []

        def on_notify(self, message):
            self.notices.append(message)

        def on_started(self, count):
            self.started.append(count)

        def on_finished(self, processed, failed):
            self.finished.append((processed, failed))

        def on_arranged(self, container, plan):
            self.arranged.append((container.id, plan))

        def on_skipped(self, container, reason):
            self.skipped.append((container.id, reason))

        def on_failed(self, container, error):
            self.failed.append((container.id, error))

    recorder = Recorder()
    pub.subscribe(recorder.on_notify, topics.NOTIFY)
    pub.subscribe(recorder.on_started, topics.RUN_STARTED)
    pub.subscribe(recorder.on_finished, topics.RUN_FINISHED)
    pub.subscribe(recorder.on_arranged, topics.CONTAINER_ARRANGED)
    pub.subscribe(recorder.on_skipped, topics.CONTAINER_SKIPPED)
    pub.subscribe(recorder.on_failed, topics.CONTAINER_FAILED)
    return recorder

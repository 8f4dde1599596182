import pytest

from nodekit.core import config as config_module
from nodekit.core.config import Config
from nodekit.scene.spatial import Spatial
from nodekit.scene.tree import SceneTree

from scene_fixtures import Enemy


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Each test starts from in-memory default configuration."""
    monkeypatch.setattr(config_module, "_config", None)
    yield


@pytest.fixture
def tree():
    return SceneTree(Config())


@pytest.fixture
def enemy_chain(tree):
    """root -> A(Enemy, "e1") -> B(Enemy, "e2")"""
    a = Spatial("e1")
    a.set_behavior(Enemy())
    b = Spatial("e2")
    b.set_behavior(Enemy())
    tree.root.add_child(a)
    a.add_child(b)
    return tree.root, a, b

import numpy as np

from nodekit.scene.node import Node
from nodekit.scene.node_util import NodeUtil
from nodekit.scene.spatial import Spatial
from nodekit.utils.math import quaternion_from_axis_angle

from scene_fixtures import Enemy


def test_world_position_composes_through_spatial_parents(tree):
    base = NodeUtil.create_native(Spatial, parent=tree.root, name="base")
    base.transform.set_local_position([10.0, 0.0, 0.0])
    enemy = NodeUtil.create(Enemy, parent=base)
    enemy.transform.set_local_position([0.0, 2.0, 0.0])

    np.testing.assert_allclose(enemy.get_world_position(), [10.0, 2.0, 0.0], atol=1e-6)


def test_parent_rotation_and_scale_apply_to_children():
    base = Spatial("base")
    child = Spatial("child")
    base.add_child(child)
    base.transform.set_local_rotation(quaternion_from_axis_angle([0.0, 0.0, 1.0], np.pi / 2))
    base.transform.set_local_scale([2.0, 2.0, 2.0])
    child.transform.set_local_position([1.0, 0.0, 0.0])

    np.testing.assert_allclose(child.get_world_position(), [0.0, 2.0, 0.0], atol=1e-5)


def test_moving_parent_updates_cached_child():
    base = Spatial("base")
    child = Spatial("child")
    base.add_child(child)
    child.get_world_position()

    base.transform.set_local_position([0.0, 0.0, 5.0])
    np.testing.assert_allclose(child.get_world_position(), [0.0, 0.0, 5.0], atol=1e-6)


def test_detach_unlinks_transform():
    base = Spatial("base")
    child = Spatial("child")
    base.add_child(child)
    base.transform.set_local_position([3.0, 0.0, 0.0])

    base.remove_child(child)
    assert child.transform.parent is None
    np.testing.assert_allclose(child.get_world_position(), [0.0, 0.0, 0.0], atol=1e-6)


def test_plain_node_breaks_transform_chain():
    base = Spatial("base")
    group = Node("group")
    child = Spatial("child")
    base.add_child(group)
    group.add_child(child)
    base.transform.set_local_position([1.0, 1.0, 1.0])

    assert child.transform.parent is None
    np.testing.assert_allclose(child.get_world_position(), [0.0, 0.0, 0.0], atol=1e-6)

# nodekit/scene/spatial.py

from typing import Optional
from nodekit.scene.behavior import register_node_type
from nodekit.scene.node import Node
from nodekit.scene.transform import Transform


@register_node_type()
class Spatial(Node):
    """
    Node with a position in space.
    Spatial children of a Spatial inherit its transform.
    """

    def __init__(self, name: Optional[str] = None):
        super().__init__(name)
        self.transform = Transform()

    def get_world_position(self):
        return self.transform.get_world_position()

    def _on_child_added(self, child: Node):
        # Link transforms
        if isinstance(child, Spatial):
            child.transform.set_parent(self.transform)

    def _on_child_removed(self, child: Node):
        if isinstance(child, Spatial) and child.transform.parent is self.transform:
            child.transform.set_parent(None)

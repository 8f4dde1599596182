# nodekit/scene/tree.py

from typing import Optional
from nodekit.core.config import Config, get_config
from nodekit.core.logging import get_logger
from nodekit.scene.node import Node

logger = get_logger()


class SceneTree:
    """
    Live scene tree.
    Owns the root node; nodes attached under it are inside the tree and
    receive enter/exit notifications.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or get_config()
        self.root = Node(self.config.get('tree.root_name', 'root'))

        self.root._propagate_enter_tree(self)
        self.root._propagate_ready()
        logger.debug(f"SceneTree created with root '{self.root.name}'")

    def add_node(self, node: Node, parent: Optional[Node] = None):
        """Add a node to the tree, under the root by default."""
        if parent is None:
            parent = self.root
        parent.add_child(node)

    def remove_node(self, node: Node):
        """Remove a node from the tree."""
        if node.parent:
            node.parent.remove_child(node)

    def get_node_by_name(self, name: str) -> Optional[Node]:
        """Find a node by name."""
        return self.root.find_child(name)

    def get_node_count(self) -> int:
        count = 0

        def visit(node: Node):
            nonlocal count
            count += 1

        self.root.traverse(visit)
        return count

    def clear(self):
        """Free every node under the root."""
        for child in self.root.get_children():
            child.free()
        logger.info(f"SceneTree '{self.root.name}' cleared")

# nodekit/scene/node.py

from typing import Callable, List, Optional, TYPE_CHECKING
from nodekit.core.logging import get_logger
from nodekit.core.signal import Signal
from nodekit.scene.behavior import Behavior, register_node_type

if TYPE_CHECKING:
    from nodekit.scene.tree import SceneTree

logger = get_logger()


@register_node_type()
class Node:
    """
    Base class for scene tree nodes.
    Holds the hierarchy (parent, ordered children), the owner relation used for
    persistence scoping, tree membership and an optional attached behavior.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name or type(self).__name__
        self.parent: Optional['Node'] = None
        self.children: List['Node'] = []
        self.owner: Optional['Node'] = None
        self.tree: Optional['SceneTree'] = None
        self.behavior: Optional[Behavior] = None

        # Lifecycle
        self.tree_entered = Signal("tree_entered")
        self.tree_exiting = Signal("tree_exiting")
        self._ready_done = False
        self._freed = False

    def __repr__(self):
        return f"<{type(self).__name__} '{self.name}'>"

    # Hierarchy

    def get_parent(self) -> Optional['Node']:
        return self.parent

    def get_children(self) -> List['Node']:
        """Direct children in order. Returns a copy."""
        return list(self.children)

    def get_child_count(self) -> int:
        return len(self.children)

    def add_child(self, child: 'Node'):
        """Add a child node, re-parenting it if it already has a parent."""
        if child is self or self.is_descendant_of(child):
            raise ValueError(f"Cannot add '{child.name}' under '{self.name}': would create a cycle")

        if child.parent:
            child.parent.remove_child(child)

        child.parent = self
        self.children.append(child)
        self._on_child_added(child)
        # logger.debug(f"Added child '{child.name}' to '{self.name}'")

        if self.tree is not None:
            child._propagate_enter_tree(self.tree)
            child._propagate_ready()

    def remove_child(self, child: 'Node'):
        """Remove a child node. The child subtree leaves the tree if it was inside."""
        if child not in self.children:
            return

        if child.tree is not None:
            child._propagate_exit_tree()

        cut_off = self._get_lineage()
        self.children.remove(child)
        child.parent = None
        self._on_child_removed(child)
        child._clear_detached_owners(cut_off)
        # logger.debug(f"Removed child '{child.name}' from '{self.name}'")

    def is_descendant_of(self, node: 'Node') -> bool:
        """True if node is a strict ancestor of this node."""
        current = self.parent
        while current is not None:
            if current is node:
                return True
            current = current.parent
        return False

    def get_path(self) -> str:
        """Slash-separated names from the root down to this node."""
        names = []
        current = self
        while current is not None:
            names.append(current.name)
            current = current.parent
        return "/" + "/".join(reversed(names))

    def find_child(self, name: str, recursive: bool = True) -> Optional['Node']:
        """Find a child by name."""
        for child in self.children:
            if child.name == name:
                return child

            if recursive:
                result = child.find_child(name, recursive)
                if result:
                    return result
        return None

    def traverse(self, callback: Callable[['Node'], None]):
        """Traverse the hierarchy (DFS, pre-order)."""
        callback(self)
        for child in self.children:
            child.traverse(callback)

    # Owner

    def get_owner(self) -> Optional['Node']:
        return self.owner

    def set_owner(self, owner: Optional['Node'], check_ancestor: bool = True):
        """
        Set the owner. By default the owner must be a strict ancestor of this
        node; anything else is logged and ignored. Deferred assignments made at
        tree entry pass check_ancestor=False and bind the owner unconditionally.
        """
        if check_ancestor and owner is not None and not self.is_descendant_of(owner):
            logger.error(f"Invalid owner '{owner.name}' for '{self.get_path()}': owner must be an ancestor")
            return
        self.owner = owner

    def _get_lineage(self) -> List['Node']:
        """This node and all of its ancestors."""
        lineage = []
        current = self
        while current is not None:
            lineage.append(current)
            current = current.parent
        return lineage

    def _clear_detached_owners(self, cut_off: List['Node']):
        """Drop owners that were on the ancestor chain this subtree was detached from."""
        def clear(node: 'Node'):
            if any(node.owner is ancestor for ancestor in cut_off):
                node.owner = None

        self.traverse(clear)

    # Type

    def is_instance_of(self, type_: type) -> bool:
        """Polymorphic type check over the node class and its attached behavior."""
        if isinstance(self, type_):
            return True
        return self.behavior is not None and isinstance(self.behavior, type_)

    def set_behavior(self, behavior: Optional[Behavior]):
        """Attach a behavior, detaching the previous one."""
        if self.behavior is not None:
            self.behavior.node = None
        self.behavior = behavior
        if behavior is not None:
            behavior.node = self

    def get_behavior(self) -> Optional[Behavior]:
        return self.behavior

    # Tree membership

    def is_inside_tree(self) -> bool:
        return self.tree is not None

    def get_tree(self) -> Optional['SceneTree']:
        return self.tree

    def is_freed(self) -> bool:
        return self._freed

    def free(self):
        """
        Detach and destroy this node and its subtree.
        All signal subscriptions are dropped, including pending one-shot callbacks.
        """
        if self._freed:
            return

        if self.parent:
            self.parent.remove_child(self)

        for child in self.children[:]:
            child.free()

        if self.behavior is not None:
            self.behavior.on_free()
            self.set_behavior(None)

        self.tree_entered.disconnect_all()
        self.tree_exiting.disconnect_all()
        self.owner = None
        self._freed = True
        # logger.debug(f"Freed node '{self.name}'")

    def _propagate_enter_tree(self, tree: 'SceneTree'):
        """Top-down: set tree, notify, then recurse."""
        self.tree = tree
        if self.behavior is not None:
            self.behavior.enter_tree()
        self.tree_entered.emit()

        for child in self.children[:]:
            child._propagate_enter_tree(tree)

    def _propagate_ready(self):
        """Bottom-up: children are ready before their parent. Runs once per node."""
        for child in self.children[:]:
            child._propagate_ready()

        if not self._ready_done:
            self._ready_done = True
            if self.behavior is not None:
                self.behavior.ready()

    def _propagate_exit_tree(self):
        """Bottom-up: children leave first, references cleared after notification."""
        for child in self.children[:]:
            child._propagate_exit_tree()

        self.tree_exiting.emit()
        if self.behavior is not None:
            self.behavior.exit_tree()
        self.tree = None

    # Hooks for subclasses

    def _on_child_added(self, child: 'Node'):
        pass

    def _on_child_removed(self, child: 'Node'):
        pass

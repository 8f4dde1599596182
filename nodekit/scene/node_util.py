# nodekit/scene/node_util.py

from typing import Iterator, List, Optional, Type, Union
from nodekit.core.config import get_config
from nodekit.core.logging import get_logger
from nodekit.scene.behavior import Behavior, BehaviorRegistry, NodeTypeRegistry
from nodekit.scene.node import Node
from nodekit.scene import spatial  # noqa: F401  Registers Spatial with NodeTypeRegistry

logger = get_logger()


class NodeUtil:
    """
    Static helpers for searching and building the scene tree.

    Searches match on type (polymorphic, see Node.is_instance_of) and an
    optional exact name; an empty name matches any node. Searches never
    modify the tree and return None or an empty iterator when nothing matches.
    """

    @staticmethod
    def get_ancestor(node: Optional[Node], type_: type, name: str = "") -> Optional[Node]:
        """
        Walk from node up through its parents.
        Returns the first node matching type_ and name, the start node included.
        """
        while node is not None:
            if NodeUtil._matches(node, type_, name):
                return node
            node = node.get_parent()
        return None

    @staticmethod
    def get_immediate_child(node: Optional[Node], type_: type,
                            compat_self_match: Optional[bool] = None) -> Optional[Node]:
        """
        Return node if it matches type_, else its first direct child that does.

        With compat_self_match the start node is re-tested for every child
        instead of the child itself, so only node or None can be returned.
        Defaults to the 'search.compat_self_match' value of the node's tree config,
        or of the global config for nodes outside a tree.
        """
        if node is None:
            return None

        if compat_self_match is None:
            config = node.get_tree().config if node.is_inside_tree() else get_config()
            compat_self_match = config.get('search.compat_self_match', False)

        if node.is_instance_of(type_):
            return node

        if compat_self_match:
            logger.debug(f"get_immediate_child on '{node.get_path()}' in compat mode, children not tested")
            for _child in node.get_children():
                if node.is_instance_of(type_):
                    return node
            return None

        for child in node.get_children():
            if child.is_instance_of(type_):
                return child
        return None

    @staticmethod
    def get_child(node: Optional[Node], type_: type, name: str = "") -> Optional[Node]:
        """Depth-first pre-order search of the subtree rooted at node."""
        if node is None:
            return None

        if NodeUtil._matches(node, type_, name):
            return node

        for child in node.get_children():
            result = NodeUtil.get_child(child, type_, name)
            if result is not None:
                return result
        return None

    @staticmethod
    def get_all_children(node: Optional[Node], type_: type) -> Iterator[Node]:
        """
        Collect every node in the subtree (node included) matching type_, in pre-order.
        The iterator is over a snapshot taken at call time and can be consumed once.
        """
        matches: List[Node] = []
        if node is not None:
            NodeUtil._collect(node, type_, matches)
        return iter(matches)

    @staticmethod
    def create(behavior: Union[Type[Behavior], str], parent: Optional[Node] = None,
               owner: Optional[Node] = None, name: str = "") -> Node:
        """
        Create a node running the given behavior.
        The node class is the behavior's base type and the default name its type name.
        """
        behavior_class = NodeUtil._resolve_behavior(behavior)
        node = behavior_class.get_base_type()()
        node.set_behavior(behavior_class())
        return NodeUtil._construct(node, behavior_class.get_type_name(), parent, owner, name)

    @staticmethod
    def create_native(type_: Union[type, str], parent: Optional[Node] = None,
                      owner: Optional[Node] = None, name: str = "") -> Node:
        """Create a node of a native node class, named after the class by default."""
        node_class = NodeUtil._resolve_node_type(type_)
        return NodeUtil._construct(node_class(), node_class.__name__, parent, owner, name)

    @staticmethod
    def _construct(node: Node, default_name: str, parent: Optional[Node],
                   owner: Optional[Node], name: str) -> Node:
        node.name = name or default_name

        if owner is not None:
            # Owner can only be assigned once the node is in the tree
            node.tree_entered.connect(lambda: node.set_owner(owner, check_ancestor=False), one_shot=True)

        if parent is not None:
            parent.add_child(node)

        if owner is not None and not node.is_inside_tree():
            logger.debug(f"Owner '{owner.name}' pending for '{node.name}' until it enters the tree")

        return node

    @staticmethod
    def _matches(node: Node, type_: type, name: str) -> bool:
        return node.is_instance_of(type_) and (not name or node.name == name)

    @staticmethod
    def _collect(node: Node, type_: type, matches: List[Node]):
        if node.is_instance_of(type_):
            matches.append(node)
        for child in node.get_children():
            NodeUtil._collect(child, type_, matches)

    @staticmethod
    def _resolve_behavior(behavior: Union[Type[Behavior], str]) -> Type[Behavior]:
        if isinstance(behavior, str):
            behavior_class = BehaviorRegistry.get(behavior)
            if behavior_class is None:
                raise ValueError(f"Unknown behavior: {behavior}")
            return behavior_class

        if not (isinstance(behavior, type) and issubclass(behavior, Behavior)):
            raise TypeError(f"{behavior!r} is not a Behavior class")
        return behavior

    @staticmethod
    def _resolve_node_type(type_: Union[type, str]) -> type:
        if isinstance(type_, str):
            node_class = NodeTypeRegistry.get(type_)
            if node_class is None:
                raise ValueError(f"Unknown node type: {type_}")
            return node_class

        if not (isinstance(type_, type) and issubclass(type_, Node)):
            raise TypeError(f"{type_!r} is not a Node class")
        return type_


get_ancestor = NodeUtil.get_ancestor
get_immediate_child = NodeUtil.get_immediate_child
get_child = NodeUtil.get_child
get_all_children = NodeUtil.get_all_children
create = NodeUtil.create
create_native = NodeUtil.create_native

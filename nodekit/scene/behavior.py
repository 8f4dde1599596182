# nodekit/scene/behavior.py

from typing import Dict, Optional, Type


class Behavior:
    """
    Base class for behaviors (scripts) attached to a node.
    A behavior declares the node class it runs on (base_type) and the
    default name given to nodes created for it (type_name).
    """

    base_type: Optional[type] = None  # Defaults to Node
    type_name: Optional[str] = None   # Defaults to the class name

    def __init__(self):
        self.node = None  # Back-reference to the node running this behavior

    @classmethod
    def get_type_name(cls) -> str:
        """Declared type name, used as the default node name."""
        return cls.type_name or cls.__name__

    @classmethod
    def get_base_type(cls) -> type:
        """Node class instantiated for this behavior."""
        if cls.base_type is not None:
            return cls.base_type

        # Avoid circular import
        from nodekit.scene.node import Node
        return Node

    def enter_tree(self):
        """Called when the node enters the live tree, before its children."""
        pass

    def ready(self):
        """Called once, after all children of the node are ready."""
        pass

    def exit_tree(self):
        """Called when the node leaves the live tree, after its children."""
        pass

    def on_free(self):
        """Called when the node is freed. Override to clean up resources."""
        pass


class BehaviorRegistry:
    """
    Behavior type registry.
    Maps behavior names to classes so nodes can be created by name.
    """

    _behaviors: Dict[str, Type[Behavior]] = {}

    @classmethod
    def register(cls, name: str, behavior_class: Type[Behavior]):
        """Register a behavior type."""
        cls._behaviors[name] = behavior_class

    @classmethod
    def get(cls, name: str) -> Optional[Type[Behavior]]:
        """Get behavior class by name."""
        return cls._behaviors.get(name)

    @classmethod
    def get_all(cls) -> Dict[str, Type[Behavior]]:
        """Get all registered behaviors."""
        return cls._behaviors.copy()

    @classmethod
    def unregister(cls, name: str):
        cls._behaviors.pop(name, None)


class NodeTypeRegistry:
    """
    Native node type registry.
    Maps node class names to classes.
    """

    _node_types: Dict[str, type] = {}

    @classmethod
    def register(cls, name: str, node_class: type):
        """Register a node type."""
        cls._node_types[name] = node_class

    @classmethod
    def get(cls, name: str) -> Optional[type]:
        """Get node class by name."""
        return cls._node_types.get(name)

    @classmethod
    def get_all(cls) -> Dict[str, type]:
        return cls._node_types.copy()

    @classmethod
    def unregister(cls, name: str):
        cls._node_types.pop(name, None)


# Auto-registration decorators
def register_behavior(name: Optional[str] = None):
    """Decorator to auto-register behaviors. Uses the declared type name by default."""

    def decorator(cls):
        BehaviorRegistry.register(name or cls.get_type_name(), cls)
        return cls

    return decorator


def register_node_type(name: Optional[str] = None):
    """Decorator to auto-register native node types. Uses the class name by default."""

    def decorator(cls):
        NodeTypeRegistry.register(name or cls.__name__, cls)
        return cls

    return decorator

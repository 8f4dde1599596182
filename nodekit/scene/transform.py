# nodekit/scene/transform.py

import numpy as np
from typing import List, Optional
from nodekit.utils.math import IDENTITY_QUATERNION, trs_matrix


class Transform:
    """
    Hierarchical transform.
    Local TRS relative to the parent; the world matrix is cached and
    recomputed lazily when this transform or an ancestor changes.
    """

    def __init__(self):
        # Local space (relative to parent)
        self.local_position = np.zeros(3, dtype=np.float32)
        self.local_rotation = IDENTITY_QUATERNION.copy()  # Quaternion [x, y, z, w]
        self.local_scale = np.ones(3, dtype=np.float32)

        self._world_matrix = np.eye(4, dtype=np.float32)
        self._dirty = True

        # Hierarchy
        self.parent: Optional['Transform'] = None
        self.children: List['Transform'] = []

    def set_parent(self, parent: Optional['Transform']):
        """Set parent transform."""
        if self.parent:
            self.parent.children.remove(self)
        self.parent = parent
        if parent:
            parent.children.append(self)
        self._mark_dirty()

    def set_local_position(self, position):
        self.local_position = np.array(position, dtype=np.float32)
        self._mark_dirty()

    def set_local_rotation(self, rotation):
        """Set rotation in local space (as quaternion)."""
        self.local_rotation = np.array(rotation, dtype=np.float32)
        self._mark_dirty()

    def set_local_scale(self, scale):
        self.local_scale = np.array(scale, dtype=np.float32)
        self._mark_dirty()

    def get_local_matrix(self) -> np.ndarray:
        return trs_matrix(self.local_position, self.local_rotation, self.local_scale)

    def get_world_matrix(self) -> np.ndarray:
        """Get world transformation matrix."""
        if self._dirty:
            local_matrix = self.get_local_matrix()
            if self.parent:
                self._world_matrix = self.parent.get_world_matrix() @ local_matrix
            else:
                self._world_matrix = local_matrix
            self._dirty = False
        return self._world_matrix

    def get_world_position(self) -> np.ndarray:
        """Get position in world space."""
        return self.get_world_matrix()[:3, 3].copy()

    def _mark_dirty(self):
        """Mark this transform and all children as needing update."""
        self._dirty = True
        for child in self.children:
            child._mark_dirty()

# nodekit/utils/math.py

import numpy as np


IDENTITY_QUATERNION = np.array([0.0, 0.0, 0.0, 1.0], dtype=np.float32)


def quaternion_from_axis_angle(axis: np.ndarray, angle: float) -> np.ndarray:
    """
    Build a unit quaternion rotating by angle (radians) around axis.
    Returns [x, y, z, w]
    """
    axis = np.asarray(axis, dtype=np.float32)
    norm = np.linalg.norm(axis)
    if norm == 0:
        return IDENTITY_QUATERNION.copy()

    half = angle * 0.5
    xyz = axis / norm * np.sin(half)
    return np.array([xyz[0], xyz[1], xyz[2], np.cos(half)], dtype=np.float32)


def quaternion_to_matrix(quat: np.ndarray) -> np.ndarray:
    """Convert quaternion [x, y, z, w] to a 4x4 rotation matrix."""
    x, y, z, w = quat
    xx, yy, zz = x * x, y * y, z * z
    xy, xz, yz = x * y, x * z, y * z
    wx, wy, wz = w * x, w * y, w * z

    mat = np.eye(4, dtype=np.float32)
    mat[:3, :3] = [
        [1.0 - 2.0 * (yy + zz), 2.0 * (xy - wz), 2.0 * (xz + wy)],
        [2.0 * (xy + wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - wx)],
        [2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (xx + yy)],
    ]
    return mat


def trs_matrix(position: np.ndarray, rotation: np.ndarray, scale: np.ndarray) -> np.ndarray:
    """Compose a translation-rotation-scale matrix."""
    mat = quaternion_to_matrix(rotation) @ np.diag(np.append(scale, 1.0)).astype(np.float32)
    mat[:3, 3] = position
    return mat

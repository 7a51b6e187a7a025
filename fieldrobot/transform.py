"""Rigid transforms as 4x4 homogeneous matrices and Euler-angle conversions.

Rotation vectors are ``(pitch, roll, yaw)``: pitch about the x axis, roll about
the y axis and yaw about the z axis. Yaw is applied first, then roll, then pitch.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from fieldrobot.angle import (
    atan2_positive,
    calc_smallest_angle,
    constrain_angle,
    deg_to_rad,
    rad_to_deg,
)

__all__ = [
    "rotation_to_euler",
    "to_robot_frame",
    "vector_to_affine",
    "vector_to_translation_affine",
    "vector_to_rotation_affine",
    "affine_to_vectors",
    "matrix_to_json",
    "json_to_matrix",
    "calculate_hinge_transform",
]


def rotation_to_euler(r: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    """Euler angles in degrees of a 3x3 rotation matrix.

    The first and last angles lie in [0, 360); the middle one in [-180, 180].
    """
    m = np.asarray(r, dtype=float)
    r20, r21, r22 = float(m[2, 0]), float(m[2, 1]), float(m[2, 2])
    first = rad_to_deg(atan2_positive(r21, r22))
    second = rad_to_deg(atan2_positive(-r20, math.hypot(r21, r22)))
    third = rad_to_deg(atan2_positive(float(m[1, 0]), float(m[0, 0])))
    return np.array([first, calc_smallest_angle(second, 0.0), third])


def to_robot_frame(x: float) -> float:
    """Turn a heading measured from the x axis into the robot frame, in [0, 360)."""
    return constrain_angle(x - 90.0)


def vector_to_translation_affine(v: Sequence[float]) -> np.ndarray:
    """Homogeneous matrix of a pure translation."""
    m = np.eye(4)
    m[:3, 3] = np.asarray(v, dtype=float)[:3]
    return m


def vector_to_rotation_affine(v: Sequence[float], in_degrees: bool = True) -> np.ndarray:
    """Homogeneous matrix of the rotation ``(pitch, roll, yaw)``."""
    pitch, roll, yaw = (float(a) for a in np.asarray(v, dtype=float)[:3])
    if in_degrees:
        pitch, roll, yaw = deg_to_rad(pitch), deg_to_rad(roll), deg_to_rad(yaw)

    cz, sz = math.cos(yaw), math.sin(yaw)
    cy, sy = math.cos(roll), math.sin(roll)
    cx, sx = math.cos(pitch), math.sin(pitch)
    rz = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    ry = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rx = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])

    m = np.eye(4)
    m[:3, :3] = rz @ ry @ rx
    return m


def vector_to_affine(t: Sequence[float], r: Sequence[float], in_degrees: bool = True) -> np.ndarray:
    """Homogeneous matrix that rotates by ``r`` and then translates by ``t``."""
    return vector_to_translation_affine(t) @ vector_to_rotation_affine(r, in_degrees)


def affine_to_vectors(m: Sequence[Sequence[float]] | np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Split a homogeneous matrix into its translation and Euler angles (degrees)."""
    matrix = np.asarray(m, dtype=float)
    return matrix[:3, 3].copy(), rotation_to_euler(matrix[:3, :3])


def matrix_to_json(m: Sequence[Sequence[float]] | np.ndarray) -> list[list[float]]:
    """Matrix as a list of rows."""
    return [[float(value) for value in row] for row in np.asarray(m, dtype=float)]


def json_to_matrix(data: Sequence[Sequence[float]]) -> np.ndarray:
    """3x3 matrix from a list of rows."""
    matrix = np.asarray(data, dtype=float)
    if matrix.shape != (3, 3):
        raise ValueError(f"expected a 3x3 matrix, got shape {matrix.shape}")
    return matrix


def calculate_hinge_transform(link_length: float, angle: float) -> np.ndarray:
    """Transform at the end of a link of ``link_length`` hinged down by ``angle`` degrees."""
    a = deg_to_rad(-angle)
    t = (0.0, -link_length * math.cos(a), link_length * math.sin(a))
    return vector_to_affine(t, (0.0, 0.0, 0.0))
"""Perspective camera model."""

import math

import numpy as np


class PerspectiveCamera:
    """Camera with an OpenGL-style perspective projection.

    The camera looks down the -Z axis from its position. Changing fov, aspect,
    near or far has no effect on projection_matrix until
    update_projection_matrix() is called.
    """

    def __init__(self, fov: float = 50.0, aspect: float = 1.0, near: float = 0.1, far: float = 2000.0):
        self.fov = fov
        self.aspect = aspect
        self.near = near
        self.far = far
        self.position = np.zeros(3)
        self.projection_matrix = np.identity(4)
        self.update_projection_matrix()

    def update_projection_matrix(self) -> None:
        """Recompute the projection from fov, aspect, near and far."""
        f = 1.0 / math.tan(math.radians(self.fov) / 2.0)
        near, far = self.near, self.far

        matrix = np.zeros((4, 4))
        matrix[0, 0] = f / self.aspect
        matrix[1, 1] = f
        matrix[2, 2] = (far + near) / (near - far)
        matrix[2, 3] = (2.0 * far * near) / (near - far)
        matrix[3, 2] = -1.0
        self.projection_matrix = matrix

    @property
    def view_matrix(self) -> np.ndarray:
        """Inverse of the camera's world transform (translation only)."""
        matrix = np.identity(4)
        matrix[:3, 3] = -self.position
        return matrix

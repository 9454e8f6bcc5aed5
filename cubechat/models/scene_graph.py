"""Scene graph primitives: geometry, material, mesh and scene.

Geometry and material hold the resources a renderer draws from. Both are
released with dispose(), which is safe to call more than once.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np


@dataclass
class Euler:
    """Rotation in radians, applied in XYZ order."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_matrix(self) -> np.ndarray:
        """Return the 4x4 rotation matrix Rx @ Ry @ Rz."""
        cx, sx = np.cos(self.x), np.sin(self.x)
        cy, sy = np.cos(self.y), np.sin(self.y)
        cz, sz = np.cos(self.z), np.sin(self.z)

        rx = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]])
        ry = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]])
        rz = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]])

        matrix = np.identity(4)
        matrix[:3, :3] = rx @ ry @ rz
        return matrix


class BoxGeometry:
    """Axis-aligned box centered at the origin.

    Each face is split into two triangles. The wireframe edges are the unique
    triangle edges, so every face shows one diagonal.
    """

    # Corner indices per face, counter-clockwise seen from outside
    _FACES = (
        (0, 1, 3, 2),  # -x
        (4, 6, 7, 5),  # +x
        (0, 4, 5, 1),  # -y
        (2, 3, 7, 6),  # +y
        (0, 2, 6, 4),  # -z
        (1, 5, 7, 3),  # +z
    )

    def __init__(self, width: float = 1.0, height: float = 1.0, depth: float = 1.0):
        self.width = width
        self.height = height
        self.depth = depth
        self.disposed = False

        hx, hy, hz = width / 2, height / 2, depth / 2
        self.vertices: Optional[np.ndarray] = np.array([
            [x, y, z]
            for x in (-hx, hx)
            for y in (-hy, hy)
            for z in (-hz, hz)
        ], dtype=float)

        triangles = []
        for a, b, c, d in self._FACES:
            triangles.append((a, b, c))
            triangles.append((a, c, d))
        self.edges: List[Tuple[int, int]] = self._unique_edges(triangles)

    @staticmethod
    def _unique_edges(triangles) -> List[Tuple[int, int]]:
        seen = set()
        edges = []
        for tri in triangles:
            for i in range(3):
                a, b = tri[i], tri[(i + 1) % 3]
                key = (min(a, b), max(a, b))
                if key not in seen:
                    seen.add(key)
                    edges.append(key)
        return edges

    def dispose(self) -> None:
        """Release vertex and edge data."""
        if self.disposed:
            return
        self.vertices = None
        self.edges = []
        self.disposed = True


@dataclass
class BasicMaterial:
    """Unlit material. Only wireframe drawing is supported."""

    color: str = "#ffffff"
    wireframe: bool = True
    line_width: float = 1.0
    disposed: bool = False

    def dispose(self) -> None:
        self.disposed = True


class Mesh:
    """A geometry drawn with a material at a position and rotation."""

    def __init__(self, geometry: BoxGeometry, material: BasicMaterial):
        self.geometry = geometry
        self.material = material
        self.position = np.zeros(3)
        self.rotation = Euler()

    @property
    def model_matrix(self) -> np.ndarray:
        """Translation times rotation."""
        matrix = self.rotation.to_matrix()
        matrix[:3, 3] = self.position
        return matrix


class Scene:
    """Ordered container of meshes composed for one rendering pass."""

    def __init__(self):
        self.children: List[Mesh] = []

    def add(self, mesh: Mesh) -> None:
        """Add a mesh to the scene."""
        if mesh not in self.children:
            self.children.append(mesh)

    def remove(self, mesh: Mesh) -> None:
        """Remove a mesh if present."""
        if mesh in self.children:
            self.children.remove(mesh)

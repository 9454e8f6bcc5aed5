"""Wireframe renderer drawing onto a Tk Canvas.

Projection is done with numpy in project_edges(), which has no Tk
dependency. CanvasRenderer owns the Canvas widget (its output node) and turns
projected segments into canvas lines each frame.
"""

import tkinter as tk
from typing import List, Tuple

import numpy as np

from cubechat.exceptions import RenderError
from cubechat.models import PerspectiveCamera, Scene
from .logging_config import get_logger

logger = get_logger("renderer")

Segment = Tuple[float, float, float, float, str, float]


def project_edges(scene: Scene, camera: PerspectiveCamera, width: int, height: int) -> List[Segment]:
    """Project every wireframe edge in the scene to screen space.

    Returns (x0, y0, x1, y1, color, line_width) tuples in pixel coordinates
    with the origin at the top-left. Edges with an endpoint outside the
    camera's near/far range are culled.
    """
    segments: List[Segment] = []
    view_projection = camera.projection_matrix @ camera.view_matrix

    for mesh in scene.children:
        geometry = mesh.geometry
        material = mesh.material
        if geometry.disposed or not material.wireframe:
            continue

        vertices = geometry.vertices
        homogeneous = np.hstack([vertices, np.ones((len(vertices), 1))])
        clip = homogeneous @ (view_projection @ mesh.model_matrix).T

        w = clip[:, 3]
        visible = (w > camera.near) & (w < camera.far)
        safe_w = np.where(visible, w, 1.0)
        ndc = clip[:, :2] / safe_w[:, None]

        screen_x = (ndc[:, 0] + 1.0) * 0.5 * width
        screen_y = (1.0 - ndc[:, 1]) * 0.5 * height

        for a, b in geometry.edges:
            if not (visible[a] and visible[b]):
                continue
            segments.append((
                float(screen_x[a]), float(screen_y[a]),
                float(screen_x[b]), float(screen_y[b]),
                material.color, material.line_width
            ))

    return segments


class CanvasRenderer:
    """Renders scenes as wireframe lines on a Tk Canvas.

    Constructing the renderer creates its Canvas (``dom_element``) under the
    given master; a missing display or destroyed master raises
    ``tkinter.TclError`` from here.
    """

    def __init__(self, master: tk.Misc, alpha: bool = True, antialias: bool = True):
        self.alpha = alpha
        self.antialias = antialias
        self.width = 1
        self.height = 1
        self.pixel_ratio = 1.0
        self.disposed = False

        background = master.cget("bg") if alpha else "#000000"
        self.dom_element = tk.Canvas(
            master,
            bg=background,
            highlightthickness=0,
            borderwidth=0
        )
        logger.debug(f"Canvas renderer created (alpha={alpha}, antialias={antialias})")

    def set_size(self, width: int, height: int) -> None:
        """Resize the output canvas."""
        self.width = width
        self.height = height
        self.dom_element.configure(width=width, height=height)

    def set_pixel_ratio(self, pixel_ratio: float) -> None:
        self.pixel_ratio = pixel_ratio

    def render(self, scene: Scene, camera: PerspectiveCamera) -> None:
        """Clear the canvas and draw the scene through the camera."""
        if self.disposed:
            raise RenderError("Renderer used after dispose()")

        canvas = self.dom_element
        canvas.delete("all")

        line_style = {}
        if self.antialias:
            line_style = {"capstyle": tk.ROUND, "joinstyle": tk.ROUND}

        for x0, y0, x1, y1, color, line_width in project_edges(scene, camera, self.width, self.height):
            canvas.create_line(
                x0, y0, x1, y1,
                fill=color,
                width=line_width * self.pixel_ratio,
                **line_style
            )

    def dispose(self) -> None:
        """Destroy the canvas. Safe to call more than once."""
        if self.disposed:
            return
        self.disposed = True
        self.dom_element.destroy()
        logger.debug("Canvas renderer disposed")

#!/usr/bin/env python3
"""Test suite for the canvas renderer and edge projection.

Run with: python -m pytest tests/test_canvas_renderer.py -v
Or standalone: python tests/test_canvas_renderer.py

Note: Canvas tests need a display and are skipped without one.
"""

import sys
import os
import unittest
import tkinter as tk

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cubechat.exceptions import RenderError
from cubechat.models import BasicMaterial, BoxGeometry, Mesh, PerspectiveCamera, Scene
from cubechat.services.canvas_renderer import CanvasRenderer, project_edges


def make_scene(color="#00ffff"):
    scene = Scene()
    mesh = Mesh(BoxGeometry(), BasicMaterial(color=color, line_width=2.0))
    scene.add(mesh)
    camera = PerspectiveCamera(75.0, 800 / 600, 0.1, 1000.0)
    camera.position[2] = 5.0
    return scene, mesh, camera


class TestProjectEdges(unittest.TestCase):
    """Tests for projecting wireframe edges to screen space."""

    def test_all_edges_projected(self):
        """Test every cube edge is visible from the default camera."""
        scene, mesh, camera = make_scene()
        segments = project_edges(scene, camera, 800, 600)
        self.assertEqual(len(segments), len(mesh.geometry.edges))

    def test_segments_centered_on_screen(self):
        """Test the cube projects around the viewport center."""
        scene, _, camera = make_scene()
        segments = project_edges(scene, camera, 800, 600)
        xs = [x for s in segments for x in (s[0], s[2])]
        ys = [y for s in segments for y in (s[1], s[3])]
        self.assertAlmostEqual((min(xs) + max(xs)) / 2, 400.0, places=6)
        self.assertAlmostEqual((min(ys) + max(ys)) / 2, 300.0, places=6)
        for x in xs:
            self.assertTrue(0 <= x <= 800)
        for y in ys:
            self.assertTrue(0 <= y <= 600)

    def test_segment_style_from_material(self):
        """Test color and width come from the material."""
        scene, _, camera = make_scene(color="#ff00ff")
        segment = project_edges(scene, camera, 800, 600)[0]
        self.assertEqual(segment[4], "#ff00ff")
        self.assertEqual(segment[5], 2.0)

    def test_behind_camera_culled(self):
        """Test meshes behind the camera produce no segments."""
        scene, mesh, camera = make_scene()
        mesh.position[2] = 10.0
        self.assertEqual(project_edges(scene, camera, 800, 600), [])

    def test_disposed_geometry_skipped(self):
        """Test disposed geometry is not drawn."""
        scene, mesh, camera = make_scene()
        mesh.geometry.dispose()
        self.assertEqual(project_edges(scene, camera, 800, 600), [])

    def test_rotation_changes_projection(self):
        """Test rotating the mesh moves its projected edges."""
        scene, mesh, camera = make_scene()
        before = project_edges(scene, camera, 800, 600)
        mesh.rotation.x += 0.5
        mesh.rotation.y += 0.5
        after = project_edges(scene, camera, 800, 600)
        self.assertNotEqual(before, after)


def _display_available():
    try:
        root = tk.Tk()
    except tk.TclError:
        return False
    root.destroy()
    return True


@unittest.skipUnless(_display_available(), "No display available")
class TestCanvasRenderer(unittest.TestCase):
    """Tests for CanvasRenderer on a real Tk root."""

    def setUp(self):
        self.root = tk.Tk()
        self.mount = tk.Frame(self.root, bg="#ffffff")
        self.mount.pack()
        self.renderer = CanvasRenderer(self.mount, alpha=True, antialias=True)

    def tearDown(self):
        self.renderer.dispose()
        self.root.destroy()

    def test_transparent_background_uses_mount_color(self):
        """Test alpha renderer paints with the mount background."""
        self.assertEqual(self.renderer.dom_element.cget("bg"), "#ffffff")

    def test_set_size(self):
        """Test canvas is resized."""
        self.renderer.set_size(320, 240)
        self.assertEqual(int(self.renderer.dom_element.cget("width")), 320)
        self.assertEqual(int(self.renderer.dom_element.cget("height")), 240)

    def test_render_draws_lines(self):
        """Test one canvas line per edge."""
        scene, mesh, camera = make_scene()
        self.renderer.set_size(800, 600)
        self.renderer.render(scene, camera)
        self.assertEqual(len(self.renderer.dom_element.find_all()), len(mesh.geometry.edges))

    def test_render_clears_previous_frame(self):
        """Test rendering twice does not accumulate items."""
        scene, mesh, camera = make_scene()
        self.renderer.set_size(800, 600)
        self.renderer.render(scene, camera)
        self.renderer.render(scene, camera)
        self.assertEqual(len(self.renderer.dom_element.find_all()), len(mesh.geometry.edges))

    def test_render_after_dispose_raises(self):
        """Test use after release is reported."""
        scene, _, camera = make_scene()
        self.renderer.dispose()
        with self.assertRaises(RenderError):
            self.renderer.render(scene, camera)

    def test_dispose_idempotent(self):
        """Test dispose can be called twice."""
        self.renderer.dispose()
        self.renderer.dispose()
        self.assertTrue(self.renderer.disposed)


if __name__ == "__main__":
    unittest.main(verbosity=2)

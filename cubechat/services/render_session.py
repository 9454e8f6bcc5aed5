"""Render session manager for the 3D viewport.

Owns one scene, camera and renderer per active lifetime and drives the
per-frame update loop on the host's frame clock:

1. ``start(host)`` builds the scene, attaches the renderer output to the
   host's mount point, sizes everything once and schedules the first frame.
2. Each frame re-schedules itself, advances the cube rotation by a fixed
   step and renders.
3. ``stop()`` cancels the pending frame and releases every owned resource
   in a fixed order.

The host is anything providing the ViewportHost methods; the Tk
implementation lives in ``cubechat.ui.viewport_host``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

from cubechat import config
from cubechat.models import BasicMaterial, BoxGeometry, Mesh, PerspectiveCamera, Scene, Viewport
from .canvas_renderer import CanvasRenderer
from .logging_config import get_logger

logger = get_logger("render")


class ViewportHost(ABC):
    """Interface the render session expects from its hosting UI.

    Usage:
        host.attach(node)                          # append output node to mount point
        token = host.add_resize_listener(cb)       # cb(width, height, pixel_ratio)
        handle = host.request_frame(callback)      # one-shot, display-paced
        host.cancel_frame(handle)
    """

    mount_target: Any = None

    @abstractmethod
    def get_viewport(self) -> Viewport:
        """Current size and pixel ratio of the mount point."""
        pass

    @abstractmethod
    def attach(self, node: Any) -> None:
        """Append the renderer's output node to the mount point."""
        pass

    @abstractmethod
    def detach(self, node: Any) -> None:
        """Remove the output node from the mount point."""
        pass

    @abstractmethod
    def add_resize_listener(self, callback: Callable[[int, int, float], None]) -> Any:
        """Subscribe to resize events, returning a token for removal."""
        pass

    @abstractmethod
    def remove_resize_listener(self, token: Any) -> None:
        """Unsubscribe the listener registered under token."""
        pass

    @abstractmethod
    def request_frame(self, callback: Callable[[], None]) -> Any:
        """Schedule callback for the next frame, returning a cancellable handle."""
        pass

    @abstractmethod
    def cancel_frame(self, handle: Any) -> None:
        """Cancel a frame scheduled by request_frame."""
        pass


def default_renderer_factory(host: ViewportHost) -> CanvasRenderer:
    """Create the Tk canvas renderer on the host's mount target."""
    return CanvasRenderer(
        host.mount_target,
        alpha=config.RENDERER_ALPHA,
        antialias=config.RENDERER_ANTIALIAS
    )


@dataclass
class SceneSession:
    """State of one active rendering lifetime."""

    host: ViewportHost
    viewport: Viewport
    scene: Scene
    camera: PerspectiveCamera
    renderer: Any
    geometry: BoxGeometry
    material: BasicMaterial
    mesh: Mesh
    animation_handle: Any = None
    resize_token: Any = None
    frame_count: int = 0
    active: bool = True


class RenderSessionManager:
    """Starts, resizes, animates and tears down the viewport's scene.

    Usage:
        manager = RenderSessionManager()
        manager.start(host)   # mount
        # ... host drives frames and resize events ...
        manager.stop()        # unmount; safe to call again
    """

    def __init__(self, renderer_factory: Optional[Callable[[ViewportHost], Any]] = None):
        self._renderer_factory = renderer_factory or default_renderer_factory
        self._session: Optional[SceneSession] = None

    @property
    def is_active(self) -> bool:
        """Check if a session is currently running."""
        return self._session is not None and self._session.active

    @property
    def session(self) -> Optional[SceneSession]:
        return self._session

    @property
    def frame_count(self) -> int:
        """Frames rendered by the current session."""
        return self._session.frame_count if self._session else 0

    def start(self, host: ViewportHost) -> None:
        """Begin an active session on the given host."""
        if self.is_active:
            logger.warning("Render session already active, ignoring start()")
            return

        viewport = host.get_viewport()
        scene = Scene()
        camera = PerspectiveCamera(
            config.CAMERA_FOV,
            viewport.aspect if viewport.is_drawable else 1.0,
            config.CAMERA_NEAR,
            config.CAMERA_FAR
        )

        # Renderer creation errors propagate to the caller as raised
        renderer = self._renderer_factory(host)
        try:
            host.attach(renderer.dom_element)
        except Exception:
            renderer.dispose()
            raise

        geometry = BoxGeometry(config.CUBE_SIZE, config.CUBE_SIZE, config.CUBE_SIZE)
        material = BasicMaterial(color=config.CUBE_COLOR, wireframe=True, line_width=config.CUBE_LINE_WIDTH)
        mesh = Mesh(geometry, material)
        scene.add(mesh)
        camera.position[2] = config.CAMERA_DISTANCE

        session = SceneSession(
            host=host,
            viewport=viewport,
            scene=scene,
            camera=camera,
            renderer=renderer,
            geometry=geometry,
            material=material,
            mesh=mesh
        )
        self._session = session

        # Size everything before the first frame renders
        renderer.set_pixel_ratio(viewport.pixel_ratio)
        self.on_resize(viewport.width, viewport.height, viewport.pixel_ratio)

        session.resize_token = host.add_resize_listener(self.on_resize)
        session.animation_handle = host.request_frame(self._on_frame)
        logger.info(f"Render session started ({viewport.width}x{viewport.height} @ {viewport.pixel_ratio}x)")

    def on_resize(self, width: int, height: int, pixel_ratio: float) -> None:
        """Apply new viewport dimensions to the camera and renderer."""
        session = self._session
        if session is None or not session.active:
            return
        if width <= 0 or height <= 0:
            logger.debug(f"Ignoring resize to non-drawable size {width}x{height}")
            return

        session.viewport = Viewport(width, height, pixel_ratio)

        camera = session.camera
        camera.aspect = width / height
        camera.update_projection_matrix()

        session.renderer.set_size(width, height)
        session.renderer.set_pixel_ratio(pixel_ratio)

        camera.position[2] = config.CAMERA_DISTANCE
        logger.debug(f"Viewport resized to {width}x{height} @ {pixel_ratio}x")

    def _on_frame(self) -> None:
        session = self._session
        if session is None or not session.active:
            return

        session.animation_handle = session.host.request_frame(self._on_frame)

        rotation = session.mesh.rotation
        rotation.x += config.ROTATION_STEP
        rotation.y += config.ROTATION_STEP
        session.frame_count += 1

        session.renderer.render(session.scene, session.camera)

    def stop(self) -> None:
        """Halt the frame loop and release all owned resources."""
        session = self._session
        if session is None or not session.active:
            return

        session.active = False
        host = session.host

        if session.animation_handle is not None:
            host.cancel_frame(session.animation_handle)
            session.animation_handle = None

        if session.resize_token is not None:
            host.remove_resize_listener(session.resize_token)
            session.resize_token = None

        host.detach(session.renderer.dom_element)
        session.scene.remove(session.mesh)
        session.geometry.dispose()
        session.material.dispose()
        session.renderer.dispose()

        logger.info(f"Render session stopped after {session.frame_count} frames")

"""Tk implementation of the render session's host contract.

The mount target is a plain tk.Frame. Resize notifications come from its
<Configure> binding and frames are paced with after()/after_cancel().
"""

import tkinter as tk
from typing import Any, Callable

from cubechat import config
from cubechat.models import Viewport
from cubechat.services import ViewportHost, get_logger

logger = get_logger("viewport")

# Tk reports 96 pixels per inch at 1x scaling
BASE_DPI = 96.0


class TkViewportHost(ViewportHost):
    """Hosts a renderer's output node inside a Tk frame."""

    def __init__(self, mount_target: tk.Frame, frame_interval_ms: int = config.FRAME_INTERVAL_MS):
        self.mount_target = mount_target
        self.frame_interval_ms = frame_interval_ms

    def pixel_ratio(self) -> float:
        """Device pixel ratio derived from Tk's screen DPI."""
        return self.mount_target.winfo_fpixels('1i') / BASE_DPI

    def get_viewport(self) -> Viewport:
        self.mount_target.update_idletasks()
        return Viewport(
            self.mount_target.winfo_width(),
            self.mount_target.winfo_height(),
            self.pixel_ratio()
        )

    def attach(self, node: tk.Widget) -> None:
        """Fill the mount target with the node, below any overlay widgets."""
        node.place(x=0, y=0, relwidth=1.0, relheight=1.0)
        node.lower()

    def detach(self, node: tk.Widget) -> None:
        node.place_forget()

    def add_resize_listener(self, callback: Callable[[int, int, float], None]) -> Any:
        def on_configure(event):
            if event.widget is self.mount_target:
                callback(event.width, event.height, self.pixel_ratio())

        return self.mount_target.bind("<Configure>", on_configure, add="+")

    def remove_resize_listener(self, token: Any) -> None:
        # Misc.unbind(sequence, funcid) drops every handler for the sequence
        # before Python 3.13, so rebind the script without this handler's line
        script = self.mount_target.bind("<Configure>")
        remaining = "\n".join(line for line in script.split("\n") if line and token not in line)
        self.mount_target.bind("<Configure>", remaining)
        self.mount_target.deletecommand(token)

    def request_frame(self, callback: Callable[[], None]) -> Any:
        return self.mount_target.after(self.frame_interval_ms, callback)

    def cancel_frame(self, handle: Any) -> None:
        self.mount_target.after_cancel(handle)

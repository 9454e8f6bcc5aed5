"""Main window UI using CustomTkinter.

Hosts the 3D viewport (with its "Hello World" overlay) and, beside it, a
chat panel backed by a ConversationSession.
"""

import tkinter as tk
from concurrent.futures import Future
from typing import Optional

import customtkinter as ctk

from cubechat import config
from cubechat.services import (
    AsyncRunner, ConversationSession, OpenAIChatManager, RenderSessionManager, setup_logging, get_logger
)
from cubechat.models import ROLE_ASSISTANT, ROLE_USER
from . import theme
from .viewport_host import TkViewportHost

logger = get_logger("ui")

ctk.set_appearance_mode("dark")
ctk.set_default_color_theme("blue")


class MainWindow:
    """Main application window."""

    def __init__(self, enable_chat: bool = True, model: str = config.DEFAULT_MODEL, log_dir: str = None,
                 frame_interval_ms: int = config.FRAME_INTERVAL_MS):
        """Initialize the main window.

        Args:
            enable_chat: Show the chat panel
            model: Model used by the chat backend
            log_dir: Directory for the log file
            frame_interval_ms: Delay between animation frames
        """
        setup_logging(log_dir)
        logger.info("Application starting")

        self._enable_chat = enable_chat
        self._model = model

        # Services
        self._render = RenderSessionManager()
        self._runner = AsyncRunner()
        self._conversation: Optional[ConversationSession] = None
        self._closing = False

        # Create main window
        self._root = ctk.CTk()
        self._root.title(config.WINDOW_TITLE)
        self._root.geometry(f"{config.WINDOW_DEFAULT_WIDTH}x{config.WINDOW_DEFAULT_HEIGHT}")
        self._root.minsize(config.WINDOW_MIN_WIDTH, config.WINDOW_MIN_HEIGHT)

        self._font_title = ctk.CTkFont(size=14, weight="bold")
        self._font_mono = ctk.CTkFont(family=theme.MONO_FONT_FAMILY, size=13)

        # Build UI
        self._create_ui()
        self._viewport_host = TkViewportHost(self._viewport_frame, frame_interval_ms)

        # Mount the viewport; follow window visibility afterwards
        self._render.start(self._viewport_host)
        self._root.bind("<Map>", self._on_map, add="+")
        self._root.bind("<Unmap>", self._on_unmap, add="+")

        self._root.protocol("WM_DELETE_WINDOW", self._on_close)
        logger.info("Application initialized")

    def _create_ui(self) -> None:
        """Create all UI elements."""
        self._root.grid_columnconfigure(0, weight=1)  # Viewport - expands
        self._root.grid_columnconfigure(1, weight=0)  # Chat panel - fixed width
        self._root.grid_rowconfigure(0, weight=1)     # Main content
        self._root.grid_rowconfigure(1, weight=0)     # Status bar

        self._create_viewport()
        if self._enable_chat:
            self._create_chat_panel()
        self._create_status_bar()

    def _create_viewport(self) -> None:
        """Create the viewport mount point with its title overlay."""
        self._viewport_frame = tk.Frame(self._root, bg=config.VIEWPORT_BG, highlightthickness=0)
        self._viewport_frame.grid(row=0, column=0, sticky="nsew")

        # Overlay stays above the renderer canvas, which the host lowers
        overlay = tk.Label(
            self._viewport_frame,
            text=config.OVERLAY_TEXT,
            font=theme.OVERLAY_FONT,
            fg=theme.OVERLAY_FG,
            bg=config.VIEWPORT_BG
        )
        overlay.place(relx=0.5, rely=0.5, anchor="center")

    def _create_chat_panel(self) -> None:
        """Create chat panel with transcript and message input."""
        frame = ctk.CTkFrame(self._root, width=config.CHAT_PANEL_WIDTH)
        frame.grid(row=0, column=1, sticky="nsew", padx=(5, 10), pady=10)
        frame.grid_propagate(False)

        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)  # Messages area expands

        ctk.CTkLabel(frame, text="Assistant", font=self._font_title).grid(row=0, column=0, sticky="w", padx=8, pady=(8, 5))

        self._messages_text = ctk.CTkTextbox(frame, state="disabled", font=self._font_mono, wrap="word")
        self._messages_text.grid(row=1, column=0, sticky="nsew", padx=8, pady=(0, 5))
        for tag, color in theme.MESSAGE_COLORS.items():
            self._messages_text.tag_config(tag, foreground=color)

        input_frame = ctk.CTkFrame(frame, fg_color="transparent")
        input_frame.grid(row=2, column=0, sticky="ew", padx=8, pady=(3, 8))

        self._message_var = ctk.StringVar()
        self._message_entry = ctk.CTkEntry(input_frame, textvariable=self._message_var, height=32, placeholder_text="Ask something...")
        self._message_entry.pack(side="left", fill="x", expand=True, padx=(0, 6))
        self._message_entry.bind('<Return>', lambda e: self._send_message())

        self._send_button = ctk.CTkButton(input_frame, text="Send", command=self._send_message, width=60, height=32)
        self._send_button.pack(side="left")

    def _create_status_bar(self) -> None:
        """Create status bar."""
        frame = ctk.CTkFrame(self._root, height=24, corner_radius=0)
        frame.grid(row=1, column=0, columnspan=2, sticky="ew")

        self._status_var = ctk.StringVar(value="Ready")
        self._status_label = ctk.CTkLabel(frame, textvariable=self._status_var, text_color=theme.STATUS_COLORS["idle"])
        self._status_label.pack(side="left", padx=8, pady=4)

    def _set_status(self, message: str, level: str = "idle") -> None:
        self._status_var.set(message)
        self._status_label.configure(text_color=theme.STATUS_COLORS.get(level, theme.STATUS_COLORS["idle"]))

    # =========================================================================
    # Viewport lifecycle
    # =========================================================================

    def _on_map(self, event) -> None:
        """Remount the viewport when the window becomes visible again."""
        if event.widget is self._root and not self._render.is_active:
            self._render.start(self._viewport_host)

    def _on_unmap(self, event) -> None:
        """Tear the viewport down while the window is minimized."""
        if event.widget is self._root:
            self._render.stop()

    # =========================================================================
    # Chat
    # =========================================================================

    def _get_conversation(self) -> ConversationSession:
        """Create the conversation session on first use."""
        if self._conversation is None:
            self._conversation = ConversationSession(
                backend_factory=lambda description: OpenAIChatManager(description, model=self._model)
            )
            logger.info("Conversation session created")
        return self._conversation

    def _append_transcript(self, speaker: str, text: str, tag: str) -> None:
        self._messages_text.configure(state="normal")
        self._messages_text.insert("end", f"{speaker}: ", tag)
        self._messages_text.insert("end", f"{text}\n\n")
        self._messages_text.configure(state="disabled")
        self._messages_text.see("end")

    def _set_input_enabled(self, enabled: bool) -> None:
        state = "normal" if enabled else "disabled"
        self._message_entry.configure(state=state)
        self._send_button.configure(state=state)

    def _send_message(self) -> None:
        """Send the typed prompt to the assistant."""
        message = self._message_var.get().strip()
        if not message:
            return

        try:
            conversation = self._get_conversation()
        except Exception as e:
            logger.error(f"Failed to create conversation session: {e}")
            self._append_transcript("Error", str(e), "error")
            self._set_status("Chat unavailable - set an OpenAI API key", "error")
            return

        self._message_var.set("")
        self._append_transcript("You", message, ROLE_USER)
        self._set_input_enabled(False)
        self._set_status("Assistant is thinking...", "thinking")

        self._runner.start()
        self._runner.submit(
            conversation.get_response(message),
            on_done=self._schedule_response
        )

    def _schedule_response(self, future: Future) -> None:
        """Hand a finished turn to the Tk thread (runs on the loop thread)."""
        # Tk is blocked in _on_close while the runner cancels pending turns
        if self._closing or future.cancelled():
            return
        self._root.after(0, lambda: self._on_response(future))

    def _on_response(self, future: Future) -> None:
        """Show the assistant's reply (runs on the Tk thread)."""
        self._set_input_enabled(True)
        error = future.exception()
        if error is not None:
            logger.error(f"Response failed: {error}")
            self._append_transcript("Error", str(error), "error")
            self._set_status(f"Response failed: {error}", "error")
            return

        self._append_transcript("Assistant", future.result(), ROLE_ASSISTANT)
        self._set_status("Ready")

    # =========================================================================
    # Shutdown
    # =========================================================================

    def _on_close(self) -> None:
        """Handle window close."""
        logger.info("Application closing")
        self._closing = True

        self._render.stop()

        if self._conversation is not None and self._runner.is_running:
            try:
                self._runner.run(self._conversation.backend.aclose(), timeout=5)
            except Exception as e:
                logger.debug(f"Error closing chat backend: {e}")
        self._runner.stop()

        logger.info("All services cleaned up")
        self._root.destroy()

    def run(self) -> None:
        """Run the application."""
        self._root.mainloop()

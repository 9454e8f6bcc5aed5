"""
Custom exceptions for Cube Chat.

Errors coming from external capabilities (Tk, the OpenAI client) are not
wrapped; these types cover conditions the application detects itself.
"""


class CubeChatError(Exception):
    """Base exception for all Cube Chat errors."""

    pass


class RenderError(CubeChatError):
    """Raised when the render session is used incorrectly."""

    pass


class ConversationError(CubeChatError):
    """Base exception for conversation errors."""

    pass


class EmptyPromptError(ConversationError, ValueError):
    """Raised when a prompt is not a string, or is empty or whitespace-only."""

    def __init__(self, prompt: object = "") -> None:
        self.prompt = prompt
        super().__init__("Prompt must be a string with non-whitespace content")


class SessionBusyError(ConversationError):
    """Raised when a second request is issued while one is still in flight."""

    def __init__(self) -> None:
        super().__init__("A response is already pending for this session")


class BackendResponseError(ConversationError):
    """Raised when the chat backend returns no usable reply."""

    pass

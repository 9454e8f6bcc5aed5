from .logging_config import setup_logging, get_logger
from .canvas_renderer import CanvasRenderer, project_edges
from .render_session import RenderSessionManager, SceneSession, ViewportHost
from .chat_backend import ChatManager, OpenAIChatManager, resolve_api_key
from .conversation_session import ConversationSession
from .async_runner import AsyncRunner

__all__ = [
    'setup_logging',
    'get_logger',
    'CanvasRenderer',
    'project_edges',
    'RenderSessionManager',
    'SceneSession',
    'ViewportHost',
    'ChatManager',
    'OpenAIChatManager',
    'resolve_api_key',
    'ConversationSession',
    'AsyncRunner'
]

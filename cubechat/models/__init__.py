from .viewport import Viewport
from .chat_message import Message, ROLE_USER, ROLE_ASSISTANT, ROLES
from .scene_graph import Euler, BoxGeometry, BasicMaterial, Mesh, Scene
from .camera import PerspectiveCamera

__all__ = [
    'Viewport',
    'Message',
    'ROLE_USER',
    'ROLE_ASSISTANT',
    'ROLES',
    'Euler',
    'BoxGeometry',
    'BasicMaterial',
    'Mesh',
    'Scene',
    'PerspectiveCamera'
]

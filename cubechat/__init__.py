"""Cube Chat.

A small desktop shell pairing a rotating wireframe cube viewport with a
conversational AI session.
"""

__version__ = "0.1.0"

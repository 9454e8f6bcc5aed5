"""Conversation session wrapping a chat backend.

Keeps the ordered dialogue history and runs one request/response turn per
get_response() call against the session's own backend.
"""

from typing import Callable, List, Tuple

from cubechat import config
from cubechat.exceptions import EmptyPromptError, SessionBusyError
from cubechat.models import Message, ROLE_ASSISTANT, ROLE_USER
from cubechat.prompts import AI_BEHAVIOR_DESCRIPTION
from .chat_backend import ChatManager, OpenAIChatManager
from .logging_config import get_logger

logger = get_logger("conversation")


class ConversationSession:
    """One ongoing dialogue with an AI backend.

    Each session builds its own backend from its behavior description, so two
    sessions never share a backend or see each other's messages.

    History is append-only. A failed backend call leaves the user message in
    place without an assistant reply; retrying means sending a new prompt.

    Usage:
        session = ConversationSession()
        answer = await session.get_response("What is quantum computing?")
    """

    def __init__(
        self,
        behavior_description: str = AI_BEHAVIOR_DESCRIPTION,
        backend_factory: Callable[[str], ChatManager] = OpenAIChatManager,
        mode: str = config.RESPONSE_MODE
    ):
        self._behavior_description = behavior_description
        self._backend = backend_factory(behavior_description)
        self._mode = mode
        self._history: List[Message] = []
        self._pending = False

    @property
    def behavior_description(self) -> str:
        return self._behavior_description

    @property
    def backend(self) -> ChatManager:
        return self._backend

    @property
    def history(self) -> Tuple[Message, ...]:
        """Messages in conversational order."""
        return tuple(self._history)

    @property
    def is_pending(self) -> bool:
        """Check if a backend response is being awaited."""
        return self._pending

    async def get_response(self, prompt: str) -> str:
        """Send a prompt and return the assistant's reply.

        Raises:
            EmptyPromptError: prompt is not a string or is empty once stripped;
                whitespace-only prompts count as empty (history untouched).
            SessionBusyError: another call has not resolved yet (history untouched).
            Exception: whatever the backend raised, unchanged.
        """
        if not isinstance(prompt, str) or not prompt.strip():
            raise EmptyPromptError(prompt)
        if self._pending:
            raise SessionBusyError()

        self._pending = True
        try:
            self._append(ROLE_USER, prompt)
            try:
                response = await self._backend.get_character_response(self._mode)
            except Exception as e:
                logger.error(f"Backend response failed after {len(self._history)} messages: {e}")
                raise
            self._append(ROLE_ASSISTANT, response)
            logger.debug(f"Turn complete ({len(self._history)} messages)")
            return response
        finally:
            self._pending = False

    def _append(self, role: str, content: str) -> None:
        self._history.append(Message(role=role, content=content))
        self._backend.add_message(role, content)

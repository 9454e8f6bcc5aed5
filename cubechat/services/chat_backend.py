"""Chat backend capability.

ChatManager is the interface a ConversationSession talks to: it is built
from a behavior description, accepts role-tagged messages, and produces a
reply on request. OpenAIChatManager implements it on top of OpenAI's
Responses API.
"""

import os
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

import httpx
import keyring
from keyring.errors import KeyringError
from openai import AsyncOpenAI

from cubechat import config
from cubechat.exceptions import BackendResponseError
from cubechat.models import ROLES
from .logging_config import get_logger

logger = get_logger("chat_backend")


def resolve_api_key() -> Optional[str]:
    """Look up the OpenAI API key from the keyring, then the environment."""
    try:
        api_key = keyring.get_password(config.KEYRING_SERVICE, config.KEYRING_USERNAME)
        if api_key:
            logger.info("API key loaded from keyring")
            return api_key
    except KeyringError as e:
        logger.warning(f"Keyring lookup failed: {e}")

    api_key = os.environ.get(config.API_KEY_ENV_VAR)
    if api_key:
        logger.info(f"API key loaded from {config.API_KEY_ENV_VAR}")
        return api_key

    logger.info("No API key found in keyring or environment")
    return None


class ChatManager(ABC):
    """Interface for a chat backend bound to one behavior description."""

    def __init__(self, behavior_description: str):
        self.behavior_description = behavior_description

    @abstractmethod
    def add_message(self, role: str, content: str) -> None:
        """Append a role-tagged message to the backend's context."""
        pass

    @abstractmethod
    async def get_character_response(self, mode: str) -> str:
        """Produce the assistant's reply to the conversation so far."""
        pass


class OpenAIChatManager(ChatManager):
    """Chat backend using the OpenAI Responses API.

    The behavior description is sent as ``instructions`` on every request;
    the message list is sent as ``input``.
    """

    def __init__(
        self,
        behavior_description: str,
        api_key: Optional[str] = None,
        model: str = config.DEFAULT_MODEL
    ):
        super().__init__(behavior_description)
        self.model = model
        self._messages: List[Dict[str, str]] = []
        self._client = AsyncOpenAI(
            api_key=api_key or resolve_api_key(),
            timeout=httpx.Timeout(
                float(config.API_TIMEOUT_SECONDS),
                connect=float(config.API_CONNECT_TIMEOUT_SECONDS)
            ),
            max_retries=config.API_MAX_RETRIES
        )
        logger.info(f"OpenAI chat manager initialized with model {model}")

    @property
    def messages(self) -> List[Dict[str, str]]:
        return list(self._messages)

    def add_message(self, role: str, content: str) -> None:
        if role not in ROLES:
            raise ValueError(f"Unknown message role: {role!r}")
        self._messages.append({"role": role, "content": content})

    async def get_character_response(self, mode: str) -> str:
        temperature = config.RESPONSE_MODE_TEMPERATURES.get(mode, config.DEFAULT_TEMPERATURE)
        logger.debug(f"Requesting response ({mode}, {len(self._messages)} messages, temperature {temperature})")

        response = await self._client.responses.create(
            model=self.model,
            instructions=self.behavior_description,
            input=self._messages,
            temperature=temperature
        )

        response_text = getattr(response, 'output_text', None)
        if not response_text:
            raise BackendResponseError(f"Empty response from model {self.model}")

        if getattr(response, 'usage', None):
            logger.debug(f"Response used {response.usage.total_tokens} tokens")
        return response_text

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.close()

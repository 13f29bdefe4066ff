# bodha/chat_service.py

from __future__ import annotations
import asyncio
import logging

from bodha.cerebras import CerebrasClient
from bodha.memory import Transcript

logger = logging.getLogger("bodha.chat")


class ChatService:
    """
    Owns the conversation and the lock around it.

    The lock is held across the upstream call, so exchanges run strictly
    one after another.
    """

    def __init__(self, client: CerebrasClient, transcript: Transcript) -> None:
        self.client = client
        self.transcript = transcript
        self.lock = asyncio.Lock()

    async def exchange(self, message: str) -> str:
        async with self.lock:
            if self.transcript.add_user(message):
                logger.info("Transcript over %s turns, reset to system prompt", self.transcript.max_turns)

            logger.info("Chat: message_len=%s transcript_turns=%s", len(message), len(self.transcript))
            reply = await self.client.complete(self.transcript.as_messages())

            self.transcript.add_assistant(reply)
            return reply

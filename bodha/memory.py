# bodha/memory.py
# ------------------------------------------------------------------
# In-process conversation transcript. Never persisted.
# ------------------------------------------------------------------

from __future__ import annotations
from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict

Role = Literal["system", "user", "assistant"]


class Turn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class Transcript:
    """
    Ordered turns sent to the model, always headed by the system turn.

    History is never windowed: once it grows past `max_turns` the next
    user turn starts over from the system turn alone.
    """

    def __init__(self, system_prompt: str, max_turns: int = 10) -> None:
        self.system = Turn(role="system", content=system_prompt)
        self.max_turns = max_turns
        self._turns: List[Turn] = [self.system]

    def __len__(self) -> int:
        return len(self._turns)

    @property
    def turns(self) -> List[Turn]:
        return list(self._turns)

    def reset(self) -> None:
        self._turns = [self.system]

    def add_user(self, content: str) -> bool:
        """Append a user turn; returns True if history was reset first."""
        was_reset = len(self._turns) > self.max_turns
        if was_reset:
            self.reset()
        self._turns.append(Turn(role="user", content=content))
        return was_reset

    def add_assistant(self, content: str) -> None:
        self._turns.append(Turn(role="assistant", content=content))

    def as_messages(self) -> List[Dict[str, str]]:
        return [t.model_dump() for t in self._turns]

"""
cerebras.py — OpenAI-compatible chat completion call (Cerebras Cloud)
"""

from __future__ import annotations
import json
import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger("bodha.cerebras")


class UpstreamError(RuntimeError):
    """Any failure talking to the completion API."""


class UpstreamStatusError(UpstreamError):
    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"API error ({status_code} {reason}): {body}")


class UpstreamContractError(UpstreamError):
    """The API answered 200 but not with a usable completion."""


class CerebrasClient:
    def __init__(
        self,
        http: httpx.AsyncClient,
        api_key: str,
        *,
        url: str,
        model: str,
        sampling: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.http = http
        self.api_key = api_key
        self.url = url
        self.model = model
        self.sampling = dict(sampling or {})

    def _payload(self, messages: List[Dict[str, str]]) -> bytes:
        payload = {"model": self.model, "messages": messages, **self.sampling}
        try:
            return json.dumps(payload, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise UpstreamError(f"Marshal error: {exc}") from exc

    async def complete(self, messages: List[Dict[str, str]]) -> str:
        """POST the transcript, return choices[0].message.content."""
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        try:
            req = self.http.build_request("POST", self.url, content=self._payload(messages), headers=headers)
        except httpx.InvalidURL as exc:
            raise UpstreamError(f"Request creation error: {exc}") from exc

        try:
            resp = await self.http.send(req)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"API call error: {exc}") from exc

        if resp.status_code != 200:
            raise UpstreamStatusError(resp.status_code, resp.reason_phrase, resp.text)

        try:
            data = resp.json()
        except ValueError as exc:
            raise UpstreamContractError(f"Invalid upstream JSON: {exc}") from exc

        choices = data.get("choices") if isinstance(data, dict) else None
        if not choices:
            raise UpstreamContractError("Upstream returned no choices")
        try:
            content = choices[0]["message"]["content"]
        except (KeyError, TypeError, IndexError) as exc:
            raise UpstreamContractError(f"Invalid upstream JSON: missing {exc}") from exc
        if not isinstance(content, str):
            raise UpstreamContractError("Invalid upstream JSON: message content is not a string")

        logger.debug("completion ok: model=%s chars=%s", data.get("model"), len(content))
        return content

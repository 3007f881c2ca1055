# arm_backend/services/ai_assistant.py
"""
Party assistant backed by an OpenAI-compatible chat completions API.

The system prompt is built from the database (leadership, program,
upcoming events) before streaming starts; the model answer is relayed
to the client as Server-Sent Events: data: {"text": "..."}
"""
import json
import logging
from typing import Any, AsyncIterator, Dict, List, Optional

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.config import get_settings
from arm_backend.core.exceptions import AIServiceError, ServiceUnavailableError
from arm_backend.core.utils import ensure_utc
from arm_backend.services.content_service import EventService, LeadershipService, ProgramService

logger = logging.getLogger(__name__)

PARTY_NAME = "A.R.M (Alliance pour le Rassemblement Malien)"
PARTY_HEADQUARTERS = "Bamako Sebenikoro, Rue 530, Porte 245, Bamako Mali"
PARTY_MOTTO = "Fraternité Liberté Égalité"


def build_system_prompt(
    leaders: List[Any],
    program: List[Any],
    events: List[Any],
    context: Optional[str] = None,
) -> str:
    leadership_lines = "\n".join(
        f"- {leader.position}: {leader.name} ({leader.location or 'N/A'})" for leader in leaders
    )

    by_category: Dict[str, List[Any]] = {}
    for item in program:
        by_category.setdefault(item.category, []).append(item)
    program_lines = "\n\n".join(
        f"{category}:\n" + "\n".join(f"- {item.title}: {item.description}" for item in items)
        for category, items in by_category.items()
    )

    if events:
        event_lines = "\n".join(
            f"- {event.title} on {ensure_utc(event.date).date().isoformat()} at {event.location}"
            for event in events
        )
    else:
        event_lines = "No upcoming events scheduled"

    prompt = (
        f"You are the official assistant of {PARTY_NAME}, a Malian political party.\n"
        f"Headquarters: {PARTY_HEADQUARTERS}\n"
        f"Motto: {PARTY_MOTTO}\n\n"
        f"Leadership:\n{leadership_lines}\n\n"
        f"Political program:\n{program_lines}\n\n"
        f"Upcoming events:\n{event_lines}\n\n"
        "Answer questions about the party, its program, its leaders and how to join. "
        "Reply in the language of the question and stay factual."
    )
    if context:
        prompt += f"\n\nAdditional context: {context}"
    return prompt


def sse_event(payload: Dict[str, Any]) -> str:
    return f"data: {json.dumps(payload)}\n\n"


def extract_delta(line: str) -> Optional[str]:
    """
    Text carried by one line of an OpenAI-style stream.

    Returns None for keep-alives, the [DONE] marker and chunks without content.
    """
    if not line.startswith("data:"):
        return None
    data = line[len("data:"):].strip()
    if not data or data == "[DONE]":
        return None
    chunk = json.loads(data)
    choices = chunk.get("choices") or []
    if not choices:
        return None
    return (choices[0].get("delta") or {}).get("content") or None


class AIAssistant:
    def __init__(self, db: AsyncSession, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.db = db
        self.settings = get_settings()
        self.transport = transport

    async def load_prompt(self, context: Optional[str] = None) -> str:
        leaders = await LeadershipService(self.db).list()
        program = await ProgramService(self.db).list()
        events = await EventService(self.db).list()
        return build_system_prompt(leaders, program, events, context)

    async def open_stream(self, message: str, context: Optional[str] = None) -> AsyncIterator[str]:
        """
        Start the completion and return an iterator of SSE frames.

        Configuration and connection errors surface here, before any
        bytes reach the client.
        """
        if not self.settings.AI_API_KEY:
            raise ServiceUnavailableError("AI assistant is not configured")

        system_prompt = await self.load_prompt(context)
        client = httpx.AsyncClient(
            base_url=self.settings.AI_API_BASE_URL,
            timeout=self.settings.AI_TIMEOUT_SECONDS,
            transport=self.transport,
        )
        request = client.build_request(
            "POST",
            "/chat/completions",
            headers={"Authorization": f"Bearer {self.settings.AI_API_KEY}"},
            json={
                "model": self.settings.AI_MODEL,
                "stream": True,
                "messages": [
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": message},
                ],
            },
        )

        try:
            response = await client.send(request, stream=True)
        except httpx.HTTPError as e:
            await client.aclose()
            logger.error(f"AI provider unreachable: {e}")
            raise AIServiceError("Failed to generate response")

        if response.status_code >= 400:
            body = await response.aread()
            await response.aclose()
            await client.aclose()
            logger.error(f"AI provider returned {response.status_code}: {body[:500]!r}")
            raise AIServiceError("Failed to generate response")

        logger.info(f"AI chat stream started ({self.settings.AI_MODEL})")
        return self._relay(client, response)

    async def _relay(self, client: httpx.AsyncClient, response: httpx.Response) -> AsyncIterator[str]:
        try:
            async for line in response.aiter_lines():
                try:
                    text = extract_delta(line)
                except json.JSONDecodeError:
                    logger.warning(f"Skipping malformed AI stream line: {line[:200]}")
                    continue
                if text:
                    yield sse_event({"text": text})
        except httpx.HTTPError as e:
            logger.error(f"AI stream interrupted: {e}")
            yield sse_event({"error": "Stream interrupted"})
        finally:
            await response.aclose()
            await client.aclose()

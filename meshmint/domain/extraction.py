"""Structured parameter extraction.

The LLM is treated as an untrusted oracle: it gets a rendered prompt and
returns free text that hopefully contains a JSON object. ``parse_json_block``
recovers that object and ``guard_fields`` decides whether it is usable.
"""

from __future__ import annotations

import json
import re
import sys
from typing import Any, Dict, Iterable, List, Mapping, Optional

from meshmint.domain.errors import InvalidContentError
from meshmint.domain.models import ExtractedParameters
from meshmint.ports.inbound import ConversationMessage
from meshmint.ports.outbound import LLMPort

# ```json ... ``` (language tag optional)
JSON_BLOCK_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)

# {{key}} placeholders in prompt templates
PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")

EXTRACTION_SYSTEM_PROMPT = (
    "You extract structured fields from conversations. "
    "Reply with a single JSON markdown block and nothing else."
)


def _log(msg: str):
    print(msg, file=sys.stderr)


def format_messages(messages: Iterable[ConversationMessage]) -> str:
    """Render turns as ``role: text`` lines, one per message."""
    lines = []
    for message in messages:
        line = f"{message.role}: {message.text}"
        model_url = message.content.get("modelUrl") if message.content else None
        if isinstance(model_url, str) and model_url and model_url not in message.text:
            line += f" (modelUrl: {model_url})"
        lines.append(line)
    return "\n".join(lines)


def compose_context(template: str, state: Mapping[str, Any]) -> str:
    """Fill ``{{key}}`` placeholders from ``state``.

    Non-string values are JSON-encoded. Unknown keys render as empty strings.
    """

    def _sub(match: re.Match) -> str:
        value = state.get(match.group(1), "")
        if isinstance(value, str):
            return value
        return json.dumps(value, ensure_ascii=False)

    return PLACEHOLDER_RE.sub(_sub, template)


def parse_json_block(text: str) -> Optional[Dict[str, Any]]:
    """Pull a JSON object out of an LLM response.

    Tries fenced blocks first, then the outermost ``{...}`` span.
    Returns None when no JSON object can be decoded.
    """
    candidates: List[str] = JSON_BLOCK_RE.findall(text)
    start, end = text.find("{"), text.rfind("}")
    if start != -1 and end > start:
        candidates.append(text[start : end + 1])

    for candidate in candidates:
        try:
            value = json.loads(candidate)
        except ValueError:
            continue
        if isinstance(value, dict):
            return value
    return None


def guard_fields(content: Any, required: Iterable[str]) -> ExtractedParameters:
    """Check that every required field is present and a string.

    Raises InvalidContentError listing the offending fields.
    """
    required = list(required)
    if not isinstance(content, dict):
        raise InvalidContentError("extractor did not return an object")

    missing = [name for name in required if name not in content]
    mistyped = [
        name for name in required
        if name in content and not isinstance(content[name], str)
    ]
    if missing or mistyped:
        problems = []
        if missing:
            problems.append("missing " + ", ".join(missing))
        if mistyped:
            problems.append("non-string " + ", ".join(mistyped))
        raise InvalidContentError("Invalid content format: " + "; ".join(problems))

    return ExtractedParameters({name: content[name] for name in required})


class StructuredExtractor:
    """Turns conversation context into an untrusted structured object."""

    def __init__(self, llm: LLMPort, model: Optional[str] = None):
        self._llm = llm
        # None leaves model choice to the LLM backend
        self._model = model

    async def extract(self, template: str, state: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """Render ``template`` with ``state`` and ask the LLM once. No retries."""
        context = compose_context(template, state)
        response = await self._llm.execute(
            context,
            system_prompt=EXTRACTION_SYSTEM_PROMPT,
            model=self._model,
        )
        content = parse_json_block(response)
        if content is None:
            _log(f"[extractor] no JSON object in response ({len(response)} chars)")
        return content

    async def extract_fields(
        self,
        template: str,
        state: Mapping[str, Any],
        required: Iterable[str],
    ) -> ExtractedParameters:
        """Extract, then guard. The only way actions obtain parameters."""
        content = await self.extract(template, state)
        return guard_fields(content, required)

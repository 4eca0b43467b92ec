"""
LLM Client
==========

Providers:
- openai      OpenAI chat completions
- openrouter  OpenAI-compatible chat completions
- gemini      Google Gemini generateContent

Used by the classifier, the structured extractor and the clarifier.

The client owns one httpx.AsyncClient, created on open() (or on the first
call) and released on close(). A semaphore caps in-flight provider calls.
Provider and transport failures come back as LLMResponse(success=False);
generate() does not raise for them.
"""

import json
import hashlib
import asyncio
import logging
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

import httpx

from .config import Settings, get_settings
from .schemas import LLMMode

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"


# =============================================================================
# Content helpers
# =============================================================================

def strip_code_fences(content: str) -> str:
    """Unwrap a ```json ... ``` (or bare ```) block"""
    text = content.strip()
    for fence in ("```json", "```"):
        start = text.find(fence)
        if start == -1 or (fence == "```" and start != 0):
            continue
        start += len(fence)
        end = text.find("```", start)
        if end > start:
            return text[start:end].strip()
        break
    return text


def decode_json_object(content: Optional[str]) -> Dict[str, Any]:
    """
    Best-effort decode of a JSON object from model output.

    Tries the whole (fence-stripped) text first, then every embedded
    {...} object, preferring the longest one. Raises ValueError when no
    object can be decoded.
    """
    if not content or not content.strip():
        raise ValueError("empty content")

    text = strip_code_fences(content)
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = None
    if isinstance(data, dict):
        return data

    decoder = json.JSONDecoder()
    best: Optional[Dict[str, Any]] = None
    best_len = 0
    pos = text.find("{")
    while pos != -1:
        try:
            candidate, end = decoder.raw_decode(text, pos)
        except json.JSONDecodeError:
            candidate, end = None, pos
        if isinstance(candidate, dict) and end - pos > best_len:
            best, best_len = candidate, end - pos
        pos = text.find("{", max(end, pos + 1))

    if best is None:
        raise ValueError("no JSON object in content")
    return best


def safe_log_content(content: Optional[str], max_chars: int = 120) -> str:
    """
    Short, hashed preview of model output for logs.

    Document text carries personal data; never log it whole.
    """
    if not content:
        return "(empty)"
    digest = hashlib.sha256(content.encode()).hexdigest()[:12]
    snippet = " ".join(content[:max_chars].split())
    return f"len={len(content)} hash={digest} preview='{snippet}...'"


# =============================================================================
# Client
# =============================================================================

@dataclass
class LLMResponse:
    """Response from LLM"""
    content: str
    model: str
    usage: Dict[str, int] = field(default_factory=dict)
    raw_response: Optional[Dict] = None
    success: bool = True
    error: Optional[str] = None

    @classmethod
    def failure(cls, model: str, error: str, raw_response: Optional[Dict] = None) -> "LLMResponse":
        return cls(content="", model=model, raw_response=raw_response, success=False, error=error)


class LLMClient:
    """
    Unified LLM client for OpenAI, OpenRouter and Gemini.

    Usage:
        async with LLMClient(settings) as client:
            response = await client.generate("Classify this document", json_mode=True)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport
        self._http: Optional[httpx.AsyncClient] = None
        self._semaphore = asyncio.Semaphore(max(1, self.settings.llm_max_concurrency))

    @property
    def mode(self) -> LLMMode:
        return self.settings.llm_mode

    @property
    def enabled(self) -> bool:
        return self.mode != LLMMode.NONE

    async def open(self):
        self._client()

    async def close(self):
        if self._http is not None:
            http, self._http = self._http, None
            await http.aclose()

    async def __aenter__(self) -> "LLMClient":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self.settings.llm_timeout, transport=self._transport)
        return self._http

    async def generate(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        json_mode: bool = False,
        max_tokens: int = 1024,
        temperature: float = 0.1,
        model: Optional[str] = None,
    ) -> LLMResponse:
        """
        Run one completion.

        Args:
            prompt: User prompt
            system_prompt: Optional system instructions
            json_mode: Ask the provider for a JSON object
            max_tokens: Output token cap
            temperature: Sampling temperature
            model: Override the configured model (chat-completions providers)

        Returns:
            LLMResponse; success=False with an error message if the call failed
        """
        mode = self.mode
        if mode == LLMMode.NONE:
            return LLMResponse.failure("none", "AI service is not configured (LLM_MODE=none)")

        async with self._semaphore:
            try:
                if mode == LLMMode.GEMINI:
                    return await self._gemini(prompt, system_prompt, json_mode, max_tokens, temperature)

                s = self.settings
                if mode == LLMMode.OPENAI:
                    provider = ("OpenAI", s.openai_base_url, s.openai_api_key, model or s.openai_model, None)
                else:
                    provider = (
                        "OpenRouter", s.openrouter_base_url, s.openrouter_api_key,
                        model or s.openrouter_model, {"X-Title": "Legal Document Generation"},
                    )
                return await self._chat_completions(
                    *provider,
                    prompt=prompt,
                    system_prompt=system_prompt,
                    json_mode=json_mode,
                    max_tokens=max_tokens,
                    temperature=temperature,
                )
            except Exception as e:
                logger.error(f"LLM generation failed ({mode.value}): {e}")
                return LLMResponse.failure(mode.value, str(e))

    async def _post(self, provider: str, model: str, url: str, **kwargs):
        """POST and decode JSON; returns (data, None) or (None, failure)"""
        try:
            response = await self._client().post(url, **kwargs)
            response.raise_for_status()
            return response.json(), None
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"{provider} API error: HTTP {status}")
            return None, LLMResponse.failure(model, f"HTTP {status}: {e.response.text[:200]}")
        except httpx.HTTPError as e:
            logger.error(f"{provider} request failed: {e}")
            return None, LLMResponse.failure(model, str(e) or e.__class__.__name__)

    async def _chat_completions(
        self,
        provider: str,
        base_url: str,
        api_key: Optional[str],
        model: str,
        extra_headers: Optional[Dict[str, str]],
        prompt: str,
        system_prompt: Optional[str],
        json_mode: bool,
        max_tokens: int,
        temperature: float,
    ) -> LLMResponse:
        """OpenAI-compatible /chat/completions"""
        if not api_key:
            logger.warning(f"{provider} API key not set")
            return LLMResponse.failure(model, f"{provider} API key not set")

        messages = [{"role": "user", "content": prompt}]
        if system_prompt:
            messages.insert(0, {"role": "system", "content": system_prompt})

        payload: Dict[str, Any] = {
            "model": model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        if json_mode:
            payload["response_format"] = {"type": "json_object"}

        headers = {"Authorization": f"Bearer {api_key}"}
        headers.update(extra_headers or {})

        data, failed = await self._post(
            provider, model, f"{base_url.rstrip('/')}/chat/completions", json=payload, headers=headers
        )
        if failed:
            return failed

        try:
            content = data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"{provider} response has no message content: {e!r}")
            return LLMResponse.failure(model, f"Response missing content: {e!r}", raw_response=data)

        usage = data.get("usage") or {}
        return LLMResponse(
            content=content,
            model=model,
            usage={
                "input_tokens": usage.get("prompt_tokens", 0),
                "output_tokens": usage.get("completion_tokens", 0),
            },
            raw_response=data,
        )

    async def _gemini(
        self,
        prompt: str,
        system_prompt: Optional[str],
        json_mode: bool,
        max_tokens: int,
        temperature: float,
    ) -> LLMResponse:
        """Google Gemini generateContent"""
        model = self.settings.gemini_model
        api_key = self.settings.gemini_api_key
        if not api_key:
            logger.warning("Gemini API key not set")
            return LLMResponse.failure(model, "Gemini API key not set")

        text = f"{system_prompt}\n\n{prompt}" if system_prompt else prompt
        generation_config: Dict[str, Any] = {
            "temperature": temperature,
            "maxOutputTokens": max_tokens,
        }
        if json_mode:
            generation_config["responseMimeType"] = "application/json"

        data, failed = await self._post(
            "Gemini",
            model,
            GEMINI_URL.format(model=model),
            json={"contents": [{"parts": [{"text": text}]}], "generationConfig": generation_config},
            params={"key": api_key},
        )
        if failed:
            return failed

        # Blocked / filtered prompts come back without candidates
        try:
            content = data["candidates"][0]["content"]["parts"][0]["text"] or ""
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"Gemini response has no candidate text: {e!r}")
            return LLMResponse.failure(model, f"Response missing content: {e!r}", raw_response=data)

        meta = data.get("usageMetadata") or {}
        return LLMResponse(
            content=content,
            model=model,
            usage={
                "input_tokens": meta.get("promptTokenCount", 0),
                "output_tokens": meta.get("candidatesTokenCount", 0),
            },
            raw_response=data,
        )

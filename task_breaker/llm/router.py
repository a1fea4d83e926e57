"""
LLM call wrapper and it does:
- Sends a single prompt to the configured model provider
- Returns the raw text answer (parsing happens in the decomposer)

Main purpose:
Central interface for all model calls.
"""


import json
from datetime import date, timedelta

import httpx

from task_breaker.core.config import settings
from task_breaker.core.logging import get_logger

log = get_logger("llm.router")


class LLMError(RuntimeError):
    pass


def _provider() -> str:
    return (settings.LLM_PROVIDER or "").lower().strip()


def _api_key_status() -> str:
    provider = _provider()
    if provider == "mock":
        return "Not needed (mock)"
    key = settings.GEMINI_API_KEY if provider == "gemini" else settings.GROQ_API_KEY
    return "Set" if key else "Not Set"


log.info(f"LLM provider={_provider() or '?'} API Key Status: {_api_key_status()}")


def _timeout() -> httpx.Timeout:
    return httpx.Timeout(settings.LLM_TIMEOUT_SECONDS, connect=10.0)


async def _gemini_generate(prompt: str) -> str:
    if not settings.GEMINI_API_KEY:
        raise LLMError("Missing GEMINI_API_KEY (or GOOGLE_API_KEY). Put it in your .env")

    url = f"{settings.GEMINI_BASE_URL.rstrip('/')}/models/{settings.LLM_MODEL}:generateContent"
    params = {"key": settings.GEMINI_API_KEY}
    payload = {
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {"temperature": settings.LLM_TEMPERATURE},
    }

    async with httpx.AsyncClient(timeout=_timeout()) as client:
        r = await client.post(url, params=params, json=payload)

    if r.status_code >= 400:
        raise LLMError(f"Gemini error {r.status_code}: {r.text}")

    data = r.json()
    try:
        parts = data["candidates"][0]["content"]["parts"]
        return "".join(p.get("text", "") for p in parts)
    except (KeyError, IndexError, TypeError):
        raise LLMError(f"Unexpected Gemini response: {data}")


async def _groq_generate(prompt: str) -> str:
    if not settings.GROQ_API_KEY:
        raise LLMError("Missing GROQ_API_KEY. Put it in your .env")

    url = f"{settings.GROQ_BASE_URL.rstrip('/')}/chat/completions"
    headers = {"Authorization": f"Bearer {settings.GROQ_API_KEY}"}
    payload = {
        "model": settings.LLM_MODEL,
        "messages": [{"role": "user", "content": prompt}],
        "temperature": settings.LLM_TEMPERATURE,
    }

    async with httpx.AsyncClient(timeout=_timeout()) as client:
        r = await client.post(url, headers=headers, json=payload)

    if r.status_code >= 400:
        raise LLMError(f"Groq error {r.status_code}: {r.text}")

    data = r.json()
    try:
        return data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        raise LLMError(f"Unexpected Groq response: {data}")


def _mock_generate(prompt: str) -> str:
    # Five steps, one every other day from today, wrapped in a fence
    # like real models tend to do.
    today = date.today()
    steps = [
        {"title": f"Step {i + 1}", "deadline": (today + timedelta(days=2 * i)).isoformat()}
        for i in range(5)
    ]
    return "```json\n" + json.dumps(steps, ensure_ascii=False) + "\n```"


async def generate_text(prompt: str) -> str:
    """
    Sends `prompt` to the configured provider exactly once and returns
    the raw text. Raises LLMError on missing keys or provider errors.
    """
    provider = _provider()

    if provider == "mock":
        return _mock_generate(prompt)
    if provider == "gemini":
        return await _gemini_generate(prompt)
    if provider == "groq":
        return await _groq_generate(prompt)

    raise LLMError(f"Unsupported LLM_PROVIDER={settings.LLM_PROVIDER}. Use gemini, groq or mock.")

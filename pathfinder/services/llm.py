import logging
from typing import Optional

import requests

from pathfinder import config
from pathfinder.services.resume import ResumeDocument

logger = logging.getLogger(__name__)

# mime types Gemini accepts as inline document parts
GEMINI_INLINE_TYPES = ("application/pdf", "text/", "image/")


class LLMError(RuntimeError):
    pass


def strip_code_fences(text: str) -> str:
    """Models like to wrap JSON in ```json ... ``` even when told not to."""
    s = (text or "").strip()
    if s.startswith("```"):
        lines = s.split("\n")
        lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        s = "\n".join(lines).strip()
    return s


def gemini_inline_ok(doc: Optional[ResumeDocument]) -> bool:
    return doc is not None and doc.mime_type.startswith(GEMINI_INLINE_TYPES)


def gemini_generate(system: str, user: str, doc: Optional[ResumeDocument] = None,
                    temperature: Optional[float] = None) -> str:
    if not config.GOOGLE_GENAI_API_KEY:
        raise LLMError("GOOGLE_GENAI_API_KEY is not set")
    if temperature is None:
        temperature = config.LLM_TEMPERATURE

    parts = [{"text": user}]
    if gemini_inline_ok(doc):
        parts.append({"inline_data": {"mime_type": doc.mime_type, "data": doc.b64}})

    payload = {
        "system_instruction": {"parts": [{"text": system}]},
        "contents": [{"role": "user", "parts": parts}],
        "generationConfig": {
            "temperature": temperature,
            "responseMimeType": "application/json",
        },
    }

    url = f"{config.GEMINI_URL}/{config.GEMINI_MODEL}:generateContent"
    r = requests.post(
        url,
        json=payload,
        headers={"x-goog-api-key": config.GOOGLE_GENAI_API_KEY},
        timeout=config.LLM_TIMEOUT,
    )
    if r.status_code != 200:
        raise LLMError(f"Gemini error {r.status_code}: {r.text[:500]}")

    data = r.json()
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        # blocked or empty candidates; let the caller decide what empty means
        logger.warning("Gemini returned no candidates: %s", data.get("promptFeedback"))
        return ""
    return "".join(p.get("text", "") for p in parts if isinstance(p, dict))


def ollama_chat(system: str, user: str, temperature: Optional[float] = None) -> str:
    if temperature is None:
        temperature = config.LLM_TEMPERATURE

    payload = {
        "model": config.OLLAMA_MODEL,
        "messages": [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ],
        "options": {"temperature": temperature},
        "format": "json",
        "stream": False,
    }

    r = requests.post(config.OLLAMA_URL, json=payload, timeout=config.LLM_TIMEOUT)
    if r.status_code != 200:
        raise LLMError(f"Ollama error {r.status_code}: {r.text[:500]}")

    return r.json()["message"]["content"]


def wants_resume_text(provider: str, doc: Optional[ResumeDocument]) -> bool:
    """Ollama never sees the binary; Gemini only for types it can't take inline."""
    if doc is None:
        return False
    if provider == "gemini":
        return not gemini_inline_ok(doc)
    return True


def generate_career_json(system: str, user: str, doc: Optional[ResumeDocument] = None) -> str:
    """Single attempt against the configured provider. Raises on any failure."""
    provider = config.LLM_PROVIDER
    if provider == "gemini":
        logger.info("Calling Gemini (%s), prompt %d chars", config.GEMINI_MODEL, len(user))
        content = gemini_generate(system, user, doc)
    elif provider == "ollama":
        logger.info("Calling Ollama (%s), prompt %d chars", config.OLLAMA_MODEL, len(user))
        content = ollama_chat(system, user)
    else:
        raise LLMError(f"Unknown LLM_PROVIDER: {provider}")

    return strip_code_fences(content)

import json
import re
from typing import Any

_FENCE_RE = re.compile(r"```[a-zA-Z0-9]*")
_decoder = json.JSONDecoder()


def strip_code_fences(s: str) -> str:
    """Removes every ```json / ``` marker, wherever the model put it."""
    return _FENCE_RE.sub("", s or "").strip()


def extract_json_array(text: str) -> Any:
    """
    Decodes the JSON value that starts at the first "[" of the answer,
    falling back to the first "{" when there is no array at all.
    Prose before it and anything after the closing bracket are ignored,
    so `{"steps": [...]}` yields the inner list.
    Raises ValueError (json.JSONDecodeError is a subclass) when nothing decodes.
    """
    cleaned = strip_code_fences(text)
    start = cleaned.find("[")
    if start == -1:
        start = cleaned.find("{")
    if start == -1:
        raise ValueError("No JSON array found in text")
    value, _end = _decoder.raw_decode(cleaned, start)
    return value

"""Default byte-size estimator for cached values."""

import json
import logging
from typing import Any

from pydantic import BaseModel

from kvcache.consts import JSON_SEPARATORS, SIZE_ENCODING

logger = logging.getLogger(__name__)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    return str(obj)


def json_bytes_size_calculator(value: Any) -> int:
    """Estimate the size of a value as the byte length of its JSON text.

    The value is serialized to compact JSON (non-ASCII characters kept as-is)
    and measured in UTF-8, with lone surrogates counted as 3 bytes each.
    Pydantic models are dumped in JSON mode; anything else json cannot
    encode falls back to ``str()``, and a value json rejects outright (for
    example a dict with tuple keys) is measured by its ``str()`` form. This
    is an approximation of payload size, not of interpreter memory.

    Args:
        value: Any value to measure.

    Returns:
        Number of bytes in the serialized representation.
    """
    try:
        text = json.dumps(
            value, separators=JSON_SEPARATORS, ensure_ascii=False, default=_json_default
        )
    except (TypeError, ValueError) as e:
        logger.debug(f"Sizing {type(value).__name__} by str(): {e}")
        text = str(value)
    return len(text.encode(SIZE_ENCODING, errors="surrogatepass"))

"""
decoder.py — Guard removal and typed JSON decoding.

Upstream prefixes JSON bodies with an anti-XSSI token such as ")]}'".
The first occurrence is removed and the rest is validated straight into
the destination pydantic type.
"""

from functools import lru_cache
from typing import Any, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from gtrends.core.constants import GUARD_PREFIX
from gtrends.core.errors import DecodeError

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(dest: Any) -> TypeAdapter:
    return TypeAdapter(dest)


def strip_guard(body: Union[bytes, str], prefix: str = GUARD_PREFIX) -> str:
    text = body.decode("utf-8") if isinstance(body, bytes) else body
    return text.replace(prefix, "", 1)


def decode(body: Union[bytes, str], dest: type[T], prefix: str = GUARD_PREFIX) -> T:
    try:
        text = strip_guard(body, prefix)
        return _adapter(dest).validate_json(text)
    except (UnicodeDecodeError, ValidationError) as exc:
        raise DecodeError(exc) from exc

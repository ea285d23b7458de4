"""Coercion of loosely typed keyword arguments.

Robot Framework passes most arguments as strings, so list arguments such
as aliases arrive as ``Sign In,Login`` or ``["Sign In", "Login"]``.
"""

from __future__ import annotations

import json
from typing import Annotated, Any, List, Optional, Tuple

from pydantic import BeforeValidator, TypeAdapter


def _coerce_string_to_list(v: Any) -> Any:
    """Coerce stringified JSON arrays and comma-separated strings to lists.

    1. JSON array string:  '["Sign In", "Login"]' -> ["Sign In", "Login"]
    2. Comma-separated:    'Sign In,Login'        -> ["Sign In", "Login"]
    3. Single value:       'Sign In'              -> ["Sign In"]
    4. Empty string:       ''                     -> None

    Non-string inputs (list, tuple, None) pass through unchanged.
    """
    if isinstance(v, str):
        v_stripped = v.strip()
        if not v_stripped:
            return None
        if v_stripped.startswith("["):
            try:
                parsed = json.loads(v_stripped)
                if isinstance(parsed, list):
                    return parsed
            except json.JSONDecodeError:
                pass
        if "," in v_stripped:
            return [item.strip() for item in v_stripped.split(",") if item.strip()]
        return [v_stripped]
    if isinstance(v, tuple):
        return list(v)
    return v


OptionalCoercedStringList = Annotated[
    Optional[List[str]], BeforeValidator(_coerce_string_to_list)
]

_ALIASES_ADAPTER = TypeAdapter(OptionalCoercedStringList)


def coerce_aliases(value: Any) -> Optional[List[str]]:
    """Normalize an aliases keyword argument.

    Raises:
        pydantic.ValidationError: If the value is not a list of strings
    """
    return _ALIASES_ADAPTER.validate_python(value)


OptionalCoercedList = Annotated[Optional[List[Any]], BeforeValidator(_coerce_string_to_list)]

_ARGUMENTS_ADAPTER = TypeAdapter(OptionalCoercedList)


def coerce_keyword_args(value: Any) -> Tuple[Any, ...]:
    """Normalize a keyword-arguments argument to a tuple (empty when unset)."""
    return tuple(_ARGUMENTS_ADAPTER.validate_python(value) or ())

"""
Validation helpers for provider configuration payloads.

This module holds the primitive predicates the provider config classes build
on (strings, booleans, URLs, arrays and mappings) plus the update-mask helper
used for partial updates.

Notes:
- Predicates never raise; callers decide which error code a failure maps to
- ``bool`` is checked with ``isinstance`` so ``0``/``1`` are not booleans
"""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

_HTTP_URL = TypeAdapter(AnyHttpUrl)

# Characters allowed anywhere in a URL string.
_URL_CHARS = re.compile(r"[^a-z0-9:/?#\[\]@!$&'()*+,;=.\-_~%]", re.IGNORECASE)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_non_null_object(value: Any) -> bool:
    """Check whether the value is a mapping (arrays and None are not)."""
    return isinstance(value, Mapping)


def is_url(value: Any) -> bool:
    """
    Check whether the value is an absolute http(s) URL string.

    Args:
        value: Candidate URL

    Returns:
        True if the value parses as an http or https URL with a host
    """
    if not is_non_empty_string(value) or _URL_CHARS.search(value):
        return False

    try:
        url = _HTTP_URL.validate_python(value)
    except ValidationError:
        return False

    return bool(url.host)


def generate_update_mask(request: Any) -> list[str]:
    """
    Build the list of dotted field paths set in a server request.

    Nested mappings are walked recursively; lists and scalars are leaves.
    Keys whose value is None are skipped.

    Example:
        >>> generate_update_mask({"enabled": True, "idpConfig": {"ssoUrl": "x"}})
        ['enabled', 'idpConfig.ssoUrl']
    """
    update_mask: list[str] = []
    if not is_non_null_object(request):
        return update_mask

    for key, value in request.items():
        if value is None:
            continue
        nested = generate_update_mask(value)
        if nested:
            update_mask.extend(f"{key}.{path}" for path in nested)
        else:
            update_mask.append(key)

    return update_mask

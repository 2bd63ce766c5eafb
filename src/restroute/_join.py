"""PathJoiner: pure functions for joining segments and building query strings.

These are the only places where path and query text is assembled. Route
types build on them and never concatenate separators themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

if TYPE_CHECKING:
    from collections.abc import Mapping

# URI component encoding keeps only the unreserved set plus these marks.
# quote() already treats A-Z a-z 0-9 - _ . ~ as safe.
_COMPONENT_SAFE = "!*'()"


def join_segments(base: str, extra: str) -> str:
    """Join a base path and one extra segment with a single ``/``.

    A root base of ``"/"`` yields ``"/" + extra`` rather than ``"//extra"``.
    Slashes inside ``extra`` are preserved verbatim. Callers guard against an
    empty ``extra``.

    >>> join_segments("api", "users")
    'api/users'
    >>> join_segments("/", "test")
    '/test'
    """
    if base == "/":
        return f"/{extra}"
    return f"{base}/{extra}"


def render_segment(value: object) -> str:
    """Render an identifier or query value to its canonical string form.

    bool -> ``true``/``false``, int -> decimal, str -> literal,
    None -> ``""``, anything else -> ``str(value)``.
    """
    match value:
        case None:
            return ""
        case bool():
            return "true" if value else "false"
        case str():
            return value
        case int():
            return str(int(value))
        case _:
            return str(value)


def encode_component(text: str) -> str:
    """Percent-encode text as a single URI component (UTF-8, ``%20`` for space)."""
    return quote(text, safe=_COMPONENT_SAFE)


def encode_query(params: Mapping[str, Any]) -> str:
    """Build ``k1=v1&k2=v2`` from a mapping, in its iteration order.

    Keys and rendered values are URI-component encoded. An empty mapping
    yields ``""``; callers check for emptiness before adding ``?``.

    >>> encode_query({"key1": "value1", "key2": "value 2", "key3": 123})
    'key1=value1&key2=value%202&key3=123'
    """
    return "&".join(
        f"{encode_component(render_segment(key))}={encode_component(render_segment(value))}"
        for key, value in params.items()
    )

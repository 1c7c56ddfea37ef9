"""
Open Graph Protocol HTML serialization.

Walks a nested property structure depth-first and emits one
``<meta property="prefix:path" content="value">`` element per scalar value.

Example:
    >>> print(to_html({"title": "Hello world", "image": [["http://x/img.jpg", {"width": 400}]]}))
    <meta property="og:title" content="Hello world">
    <meta property="og:image" content="http://x/img.jpg">
    <meta property="og:image:width" content="400">
"""
import html
from collections.abc import Mapping
from typing import Any, Iterable, Iterator, List, Tuple

from ogpt.constants import META_ATTRIBUTE, OG_PREFIX


def _is_serializable(value: Any) -> bool:
    return callable(getattr(value, "to_entries", None)) or callable(getattr(value, "to_dict", None))


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple)) or _is_serializable(value)


def _entries(og: Any) -> Iterator[Tuple[Any, Any]]:
    """Yield (key, value) pairs; sequences yield positional integer keys."""
    if callable(getattr(og, "to_entries", None)):
        og = og.to_entries()
    elif callable(getattr(og, "to_dict", None)):
        og = og.to_dict()
    if isinstance(og, Mapping):
        return iter(og.items())
    if isinstance(og, (list, tuple)):
        return enumerate(og)
    raise TypeError(f"Cannot build meta elements from {type(og).__name__}")


def _render_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1"
    return str(value)


def build_html(og: Any, prefix: str = OG_PREFIX, meta_attribute: str = META_ATTRIBUTE) -> str:
    """
    Build Open Graph meta elements from a nested property structure.

    Args:
        og: Mapping, sequence, or object with ``to_entries()`` or ``to_dict()``
        prefix: Property prefix for this level (e.g. 'og', 'og:image')
        meta_attribute: Attribute holding the property name ('property' or 'name')

    Returns:
        Newline-terminated meta elements, or an empty string for empty input

    Raises:
        TypeError: If ``og`` is not a mapping, sequence or serializable object,
            or holds a set (sets have no stable order)
    """
    if og is None:
        return ""
    lines: List[str] = []
    _walk(og, prefix, meta_attribute, lines)
    return "".join(lines)


def _walk(og: Any, prefix: str, meta_attribute: str, lines: List[str]) -> None:
    for key, content in _entries(og):
        named = isinstance(key, str) and bool(key)
        if isinstance(content, (set, frozenset)):
            raise TypeError(f"Cannot build meta elements from unordered {type(content).__name__}")
        if _is_container(content):
            _walk(content, f"{prefix}:{html.escape(key)}" if named else prefix, meta_attribute, lines)
        elif content:
            name = f"{prefix}:{html.escape(key)}" if named else prefix
            lines.append(
                f'<meta {meta_attribute}="{name}" content="{html.escape(_render_scalar(content))}">\n'
            )


def to_html(og: Any, prefix: str = OG_PREFIX, meta_attribute: str = META_ATTRIBUTE) -> str:
    """Build meta elements without the trailing newline."""
    return build_html(og, prefix, meta_attribute).rstrip("\n")


def prefix_attribute(objects: Iterable[Any]) -> str:
    """
    Build the value of an HTML ``prefix`` attribute for the given objects.

    Each object (or class) must expose ``PREFIX`` and ``NS``. A prefix used by
    several objects is listed once; objects without a namespace (media) are
    skipped.

    Example:
        >>> prefix_attribute([OpenGraphProtocol(), Article()])
        'og: http://ogp.me/ns# article: http://ogp.me/ns/article#'
    """
    seen = {}
    for obj in objects:
        if obj.PREFIX and obj.NS and obj.PREFIX not in seen:
            seen[obj.PREFIX] = obj.NS
    return " ".join(f"{prefix}: {ns}" for prefix, ns in seen.items())

"""Query and form string helpers"""

from typing import Any, List, Mapping, Tuple
from urllib.parse import parse_qsl, urlencode


def filter_empty(args: Mapping[str, Any]) -> dict:
    """Drop falsy values (None, "", False, 0, empty containers) from args"""
    return {key: value for key, value in args.items() if value}


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _flatten(prefix: str, value: Any) -> List[Tuple[str, str]]:
    """Expand nested mappings and sequences into bracketed keys"""
    if isinstance(value, Mapping):
        pairs: List[Tuple[str, str]] = []
        for key, item in value.items():
            pairs.extend(_flatten(f"{prefix}[{key}]", item))
        return pairs
    if isinstance(value, (list, tuple)):
        pairs = []
        for index, item in enumerate(value):
            pairs.extend(_flatten(f"{prefix}[{index}]", item))
        return pairs
    if value is None:
        return []
    return [(prefix, _stringify(value))]


def _pairs(args: Mapping[str, Any]) -> List[Tuple[str, str]]:
    pairs: List[Tuple[str, str]] = []
    for key, value in args.items():
        pairs.extend(_flatten(str(key), value))
    return pairs


def encode_query(args: Mapping[str, Any]) -> str:
    """
    URL-encode args as a query or form string, keeping the mapping's key order

    Example:
        >>> encode_query({"status": "ACTIVE", "filter": {"tag": "x y"}})
        'status=ACTIVE&filter%5Btag%5D=x+y'
    """
    return urlencode(_pairs(args))


def add_query_args(path: str, args: Mapping[str, Any]) -> str:
    """
    Merge the non-empty args into the query string of path

    Keys already present in path are replaced by the new values.
    """
    pairs = _pairs(filter_empty(args))
    if not pairs:
        return path

    base, _, existing = path.partition("?")
    replaced = {key for key, _ in pairs}
    kept = [
        (key, value)
        for key, value in parse_qsl(existing, keep_blank_values=True)
        if key not in replaced
    ]
    return f"{base}?{urlencode(kept + pairs)}"

"""
Form/query string encoding matching what the DigiTickets API parses.

- spaces become '+', everything else outside [A-Za-z0-9_.-~] is %XX
- True -> 1, False -> 0, None entries are dropped
- nested mappings: key[sub]=value, sequences: key[0]=value
"""

from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote_plus


def _scalar(value: Any) -> str:
    if value is True:
        return "1"
    if value is False:
        return "0"
    return str(value)


def _flatten(prefix: str, value: Any, out: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for k, v in value.items():
            _flatten(f"{prefix}[{k}]", v, out)
    elif isinstance(value, (list, tuple)):
        for i, v in enumerate(value):
            _flatten(f"{prefix}[{i}]", v, out)
    else:
        out.append((prefix, _scalar(value)))


def build_query(params: Optional[Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]]) -> str:
    """Encode a mapping or ordered (key, value) pairs as ``a=1&b%5Bc%5D=2``."""
    if not params:
        return ""
    items = params.items() if isinstance(params, Mapping) else params
    pairs: List[Tuple[str, str]] = []
    for key, value in items:
        _flatten(str(key), value, pairs)
    return "&".join(f"{quote_plus(k)}={quote_plus(v)}" for k, v in pairs)

import re
from typing import Any, Callable, Optional
from urllib.parse import quote

from ..models.errors import RequestBuildError

_PATH_PARAM = re.compile(r"{(.*?)}")
_API_VERSION = "{api-version}"

# characters encodeURI leaves alone, besides letters and digits
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


def encode_uri(value: str) -> str:
    return quote(value, safe=_URI_SAFE)


def encode_uri_component(value: str) -> str:
    return quote(value, safe="-_.!~*'()")


def _to_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def get_query_string(params: dict[str, Any]) -> str:
    """Serialize query parameters, skipping absent values.

    Lists repeat the key, mappings are flattened to ``key[sub]``.

    Examples:
        >>> get_query_string({"a": 1, "b": None, "c": [1, 2]})
        '?a=1&c=1&c=2'
    """
    pairs: list[str] = []

    def process(key: str, value: Any) -> None:
        if value is None:
            return
        if isinstance(value, (list, tuple)):
            for item in value:
                process(key, item)
        elif isinstance(value, dict):
            for sub_key, sub_value in value.items():
                process(f"{key}[{sub_key}]", sub_value)
        else:
            pairs.append(
                f"{encode_uri_component(key)}={encode_uri_component(_to_string(value))}"
            )

    for key, value in params.items():
        process(key, value)

    return f"?{'&'.join(pairs)}" if pairs else ""


def get_url(
    base: str,
    template: str,
    path: dict[str, Any],
    query: dict[str, Any],
    *,
    version: str = "",
    encode_path: Optional[Callable[[str], str]] = None,
) -> str:
    """Build the absolute URL for a call.

    Raises:
        RequestBuildError: If a placeholder in the template has no value.
    """
    encoder = encode_path or encode_uri

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        value = path.get(name)
        if value is None:
            raise RequestBuildError(
                f"Missing required path parameter '{name}' for '{template}'"
            )
        return encoder(_to_string(value))

    rendered = _PATH_PARAM.sub(substitute, template.replace(_API_VERSION, version))
    return f"{base}{rendered}{get_query_string(query)}"

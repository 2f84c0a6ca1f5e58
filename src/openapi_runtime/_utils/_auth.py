import base64
from typing import Any, Optional

from .._config import OpenAPIConfig
from ._resolver import resolve


def _has_value(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def basic_credentials(username: str, password: str) -> str:
    return base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")


async def resolve_authorization(config: OpenAPIConfig) -> Optional[str]:
    """Resolve the Authorization header value for one call.

    A token source wins over username/password. The token provider, if any, is
    invoked exactly once per call and its errors propagate to the caller.

    Args:
        config (OpenAPIConfig): The client configuration.

    Returns:
        Optional[str]: ``"Bearer <token>"``, ``"Basic <credentials>"`` or None
        when no credentials are configured.
    """
    if config.token is not None:
        token = await resolve(config.token)
        if _has_value(token):
            return f"Bearer {token}"

    username = await resolve(config.username)
    password = await resolve(config.password)
    if _has_value(username) and _has_value(password):
        return f"Basic {basic_credentials(username, password)}"

    return None

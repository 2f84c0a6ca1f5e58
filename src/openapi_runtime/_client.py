import os
from logging import getLogger
from os import environ as env
from typing import Any, Mapping, Union

from dotenv import load_dotenv

from ._config import OpenAPIConfig
from ._services import BaseHttpRequest, HttpxHttpRequest
from ._utils._logs import setup_logging
from ._utils.constants import (
    DOTENV_FILE,
    ENV_BASE_URL,
    ENV_PASSWORD,
    ENV_TOKEN,
    ENV_USERNAME,
    ENV_VERSION,
)


def _normalize_keys(values: Mapping[str, Any]) -> dict[str, Any]:
    # accept both field names (base) and aliases (BASE); aliases win downstream
    fields = OpenAPIConfig.model_fields
    normalized: dict[str, Any] = {}
    for key, value in values.items():
        field = fields.get(key)
        normalized[field.alias if field is not None and field.alias else key] = value
    return normalized


class BaseApiClient:
    """
    Base class of generated API clients.

    A generated client sets ``BASE`` and ``VERSION`` from the API description and
    exposes one property per service. Every service shares this client's
    immutable configuration and request implementation.

    Examples:
        ```python
        client = ApiClient({"TOKEN": fetch_token})
        user = await client.users.get_user(user_id=1)

        result = await client.users.get_user_either(user_id=1)
        if result.is_left():
            print(result.left.status)
        ```
    """

    BASE: str = ""
    VERSION: str = ""

    def __init__(
        self,
        config: Union[OpenAPIConfig, Mapping[str, Any], None] = None,
        http_request: type[BaseHttpRequest] = HttpxHttpRequest,
        *,
        debug: bool = False,
    ) -> None:
        """
        Initialize the client.

        Args:
            config (Union[OpenAPIConfig, Mapping[str, Any], None]): A ready config, or a
                mapping of overrides (``TOKEN``, ``USERNAME``, ``PASSWORD``, ``BASE``,
                ``HEADERS``, ``errorMessages``...) applied over the client defaults.
            http_request (type[BaseHttpRequest]): The request implementation to use.
                Subclass ``BaseHttpRequest`` to replace the transport.
            debug (bool): Enable debug logging. Defaults to False.
        """
        if isinstance(config, OpenAPIConfig):
            self._config = config
        else:
            values: dict[str, Any] = {"BASE": self.BASE, "VERSION": self.VERSION}
            values.update(_normalize_keys(config or {}))
            self._config = OpenAPIConfig.model_validate(values)

        if debug:
            setup_logging(debug)
        log = getLogger("openapi_runtime")
        log.debug("CONFIG:")
        log.debug(
            f"{self._config.model_dump(include={'base', 'version', 'error_messages'})}"
        )

        self.request = http_request(self._config)

    @classmethod
    def from_env(
        cls,
        http_request: type[BaseHttpRequest] = HttpxHttpRequest,
        *,
        debug: bool = False,
        **overrides: Any,
    ) -> "BaseApiClient":
        """
        Build a client from ``OPENAPI_*`` environment variables.

        A ``.env`` file in the working directory is loaded first. Keyword
        overrides win over the environment.
        """
        load_dotenv(dotenv_path=os.path.join(os.getcwd(), DOTENV_FILE))
        values: dict[str, Any] = {
            "BASE": env.get(ENV_BASE_URL) or cls.BASE,
            "VERSION": env.get(ENV_VERSION) or cls.VERSION,
            "TOKEN": env.get(ENV_TOKEN),
            "USERNAME": env.get(ENV_USERNAME),
            "PASSWORD": env.get(ENV_PASSWORD),
        }
        values.update(_normalize_keys(overrides))
        return cls(values, http_request, debug=debug)

    @property
    def config(self) -> OpenAPIConfig:
        return self._config


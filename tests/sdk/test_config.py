import pytest
from pydantic import ValidationError

from openapi_runtime import AsyncProvider, OpenAPIConfig, Provider, StaticValue


class TestOpenAPIConfig:
    def test_accepts_aliases(self):
        config = OpenAPIConfig(
            BASE="http://localhost:3000/base",
            VERSION="1.0",
            TOKEN="token",
            errorMessages={418: "I'm a teapot"},
        )

        assert config.base == "http://localhost:3000/base"
        assert config.version == "1.0"
        assert config.token == StaticValue("token")
        assert config.error_messages == {418: "I'm a teapot"}

    def test_accepts_field_names(self):
        config = OpenAPIConfig(base="http://api", version="2", username="user")

        assert config.base == "http://api"
        assert config.version == "2"
        assert config.username == StaticValue("user")

    def test_defaults(self):
        config = OpenAPIConfig()

        assert config.base == ""
        assert config.version == ""
        assert config.token is None
        assert config.username is None
        assert config.password is None
        assert config.headers is None
        assert config.error_messages == {}
        assert config.encode_path is None

    def test_wraps_callables_as_providers(self):
        def get_token() -> str:
            return "token"

        config = OpenAPIConfig(TOKEN=get_token, HEADERS=lambda: {"X-Trace": "1"})

        assert config.token == Provider(get_token)
        assert isinstance(config.headers, Provider)

    def test_wraps_coroutine_functions_as_async_providers(self):
        async def get_token() -> str:
            return "token"

        config = OpenAPIConfig(TOKEN=get_token)

        assert config.token == AsyncProvider(get_token)

    def test_keeps_existing_resolvers(self):
        resolver = StaticValue("token")

        config = OpenAPIConfig(TOKEN=resolver)

        assert config.token is resolver

    def test_strips_trailing_slash_from_base(self):
        config = OpenAPIConfig(BASE="http://localhost:3000/base/")

        assert config.base == "http://localhost:3000/base"

    def test_normalizes_error_message_keys(self):
        config = OpenAPIConfig(errorMessages={"500": "Boom", 404: "Missing"})

        assert config.error_messages == {500: "Boom", 404: "Missing"}

    def test_rejects_non_numeric_error_status(self):
        with pytest.raises(ValidationError):
            OpenAPIConfig(errorMessages={"oops": "Boom"})

    def test_is_frozen(self):
        config = OpenAPIConfig(BASE="http://api")

        with pytest.raises(ValidationError):
            config.base = "http://other"  # type: ignore[misc]

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._utils._resolver import Resolver, to_resolver


class OpenAPIConfig(BaseModel):
    """Client-scoped settings shared by every call made through one client.

    Credential and header fields accept a plain value or a zero-argument
    (async) function; both are stored as a ``Resolver`` and resolved once per
    call.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    base: str = Field(default="", alias="BASE")
    version: str = Field(default="", alias="VERSION")
    token: Optional[Resolver] = Field(default=None, alias="TOKEN")
    username: Optional[Resolver] = Field(default=None, alias="USERNAME")
    password: Optional[Resolver] = Field(default=None, alias="PASSWORD")
    headers: Optional[Resolver] = Field(default=None, alias="HEADERS")
    error_messages: dict[int, str] = Field(
        default_factory=dict, alias="errorMessages"
    )
    encode_path: Optional[Callable[[str], str]] = Field(
        default=None, alias="ENCODE_PATH"
    )

    @field_validator("token", "username", "password", "headers", mode="before")
    @classmethod
    def validate_resolver(cls, value: Any) -> Optional[Resolver]:
        return to_resolver(value)

    @field_validator("error_messages", mode="before")
    @classmethod
    def validate_error_messages(cls, value: Any) -> dict[int, str]:
        if value is None:
            return {}
        return {int(status): str(message) for status, message in value.items()}

    @field_validator("base", mode="before")
    @classmethod
    def validate_base(cls, value: Any) -> str:
        # paths in operation templates always start with "/"
        return "" if value is None else str(value).rstrip("/")

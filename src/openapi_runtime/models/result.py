from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import ApiError

T = TypeVar("T")


class ApiResult(BaseModel):
    """A completed HTTP exchange, reduced to what classification needs."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    url: str
    ok: bool
    status: int
    status_text: str = Field(alias="statusText")
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any = None


@dataclass(frozen=True)
class Success(Generic[T]):
    payload: T


@dataclass(frozen=True)
class Failure:
    error: ApiError


# Cancellation is the third outcome. It never produces a value and is carried
# by the CancelablePromise state instead.
Outcome = Union[Success[Any], Failure]

from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar, Union

from .errors import ApiError

T = TypeVar("T")


@dataclass(frozen=True)
class Right(Generic[T]):
    """Successful outcome of an Either-returning operation."""

    right: T
    tag: Literal["Right"] = field(default="Right", init=False)

    def is_right(self) -> bool:
        return True

    def is_left(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"_tag": self.tag, "right": self.right}


@dataclass(frozen=True)
class Left:
    """Failed outcome of an Either-returning operation.

    Only classified API failures end up here. Transport failures and
    cancellation are still raised.
    """

    left: ApiError
    tag: Literal["Left"] = field(default="Left", init=False)

    def is_right(self) -> bool:
        return False

    def is_left(self) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {"_tag": self.tag, "left": self.left.to_dict()}


Either = Union[Left, Right[T]]

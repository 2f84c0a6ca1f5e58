from .either import Either, Left, Right
from .errors import ApiError, CancelError, RequestBuildError
from .result import ApiResult, Failure, Outcome, Success

__all__ = [
    "ApiError",
    "ApiResult",
    "CancelError",
    "Either",
    "Failure",
    "Left",
    "Outcome",
    "RequestBuildError",
    "Right",
    "Success",
]

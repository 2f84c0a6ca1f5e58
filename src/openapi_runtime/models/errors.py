from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .._utils._request_spec import ApiRequestOptions
    from .result import ApiResult


class RequestBuildError(ValueError):
    """Raised when an operation's parameters cannot be turned into a request.

    This happens before any network I/O, e.g. when a path placeholder has no
    value or when both a body and form data were supplied.
    """


class ApiError(Exception):
    """Raised when the server answers with a status outside the 2xx range.

    Attributes:
        name: Always ``"ApiError"``.
        message: Resolved from the effective status-to-message table.
        url: Final URL of the response.
        status: HTTP status code.
        status_text: HTTP reason phrase.
        body: Parsed response payload.
        request: The options of the call that failed.
    """

    name = "ApiError"

    def __init__(
        self,
        request: Optional["ApiRequestOptions"],
        response: "ApiResult",
        message: str,
    ) -> None:
        self.message = message
        self.url = response.url
        self.status = response.status
        self.status_text = response.status_text
        self.body = response.body
        self.request = request
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "message": self.message,
            "url": self.url,
            "status": self.status,
            "statusText": self.status_text,
            "body": self.body,
        }

    def __repr__(self) -> str:
        return f"ApiError(status={self.status}, message={self.message!r}, url={self.url!r})"


class CancelError(Exception):
    """Raised when an in-flight request was cancelled by its caller."""

    name = "CancelError"

    def __init__(self, message: str = "Request aborted") -> None:
        self.message = message
        super().__init__(self.message)

    @property
    def is_cancelled(self) -> bool:
        return True

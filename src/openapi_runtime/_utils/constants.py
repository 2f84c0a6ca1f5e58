# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_COOKIE = "Cookie"

# Media types
MEDIA_TYPE_JSON = "application/json"
MEDIA_TYPE_OCTET_STREAM = "application/octet-stream"

# Classification
GENERIC_ERROR_MESSAGE = "Generic Error"
DEFAULT_ERROR_MESSAGES: dict[int, str] = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}

# Cancellation
REQUEST_ABORTED_MESSAGE = "Request aborted"

# Environment
ENV_BASE_URL = "OPENAPI_BASE"
ENV_VERSION = "OPENAPI_VERSION"
ENV_TOKEN = "OPENAPI_TOKEN"
ENV_USERNAME = "OPENAPI_USERNAME"
ENV_PASSWORD = "OPENAPI_PASSWORD"
DOTENV_FILE = ".env"

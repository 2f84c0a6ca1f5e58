# Client emitted by the code generator for the end-to-end test API.
from .api_client import ApiClient
from .services import ComplexService, ErrorService, ParametersService, SimpleService

__all__ = [
    "ApiClient",
    "ComplexService",
    "ErrorService",
    "ParametersService",
    "SimpleService",
]

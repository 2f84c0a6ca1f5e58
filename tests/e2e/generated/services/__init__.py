from .complex_service import ComplexService
from .error_service import ErrorService
from .parameters_service import ParametersService
from .simple_service import SimpleService

__all__ = ["ComplexService", "ErrorService", "ParametersService", "SimpleService"]

"""
Domain Exceptions - Falhas de consulta ao serviço de localidades
Clean Architecture: Domain layer exceptions
"""
from typing import Optional


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidStateCodeException(DomainException):
    """Raised when a state code is empty"""
    pass


class InvalidDistrictIdException(DomainException):
    """Raised when a district identifier is not a positive integer"""
    pass


class LocalityNetworkException(DomainException):
    """Raised when the IBGE service cannot be reached (DNS, conexão, timeout)"""
    pass


class LocalityRemoteException(DomainException):
    """Raised when the IBGE service answers with a non-2xx status"""
    def __init__(self, message: str, status_code: int, details: Optional[dict] = None):
        details = dict(details or {})
        details.setdefault("status", status_code)
        super().__init__(message, details=details)
        self.status_code = status_code

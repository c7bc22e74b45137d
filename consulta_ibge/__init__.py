"""
Consulta IBGE - cliente do serviço de localidades (estados e distritos)
"""
from consulta_ibge.application.services.locality_client import AsyncLocalityClient, LocalityClient
from consulta_ibge.domain.exceptions import (
    DomainException,
    InvalidDistrictIdException,
    InvalidStateCodeException,
    LocalityNetworkException,
    LocalityRemoteException,
)

__version__ = "1.0.0"


def fetch_state(code) -> str:
    """Atalho: consulta um estado com um LocalityClient novo"""
    return LocalityClient().fetch_state(code)


def fetch_district(district_id) -> str:
    """Atalho: consulta um distrito com um LocalityClient novo"""
    return LocalityClient().fetch_district(district_id)


__all__ = [
    'LocalityClient',
    'AsyncLocalityClient',
    'fetch_state',
    'fetch_district',
    'DomainException',
    'InvalidStateCodeException',
    'InvalidDistrictIdException',
    'LocalityNetworkException',
    'LocalityRemoteException',
]

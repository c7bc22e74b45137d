"""
Output Port: Locality Transport
Contrato para o transporte HTTP usado nas consultas de localidades
"""
from abc import ABC, abstractmethod

from consulta_ibge.domain.value_objects.locality_response import LocalityResponse


class ILocalityTransport(ABC):
    """Interface síncrona: executa um GET e devolve a resposta bruta"""

    @abstractmethod
    def get(self, url: str) -> LocalityResponse:
        """
        Executa GET na URL informada
        
        Args:
            url: URL completa do recurso
        
        Returns:
            LocalityResponse com status e corpo em texto
        
        Raises:
            LocalityNetworkException: se a conexão falhar
        """
        raise NotImplementedError


class IAsyncLocalityTransport(ABC):
    """Interface assíncrona equivalente a ILocalityTransport"""

    @abstractmethod
    async def get(self, url: str) -> LocalityResponse:
        raise NotImplementedError

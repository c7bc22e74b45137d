"""
Output Adapter: Transporte síncrono com requests
Uma conexão por chamada, sem sessão compartilhada
"""
from typing import Union

import requests

from consulta_ibge.application.ports.output.locality_transport_port import ILocalityTransport
from consulta_ibge.domain.constants import API
from consulta_ibge.domain.exceptions import LocalityNetworkException
from consulta_ibge.domain.value_objects.locality_response import LocalityResponse
from consulta_ibge.shared.config.logger_config import get_logger

logger = get_logger(child=True)

_DEFAULT = object()


class RequestsLocalityTransport(ILocalityTransport):
    """Transporte HTTP bloqueante baseado em requests.get"""

    def __init__(self, timeout: Union[float, None, object] = _DEFAULT):
        """
        Args:
            timeout: Timeout em segundos (None = sem timeout; omitido usa API.HTTP_TIMEOUT)
        """
        self.timeout = API.HTTP_TIMEOUT if timeout is _DEFAULT else timeout

    def get(self, url: str) -> LocalityResponse:
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as ex:
            logger.warning("Falha de rede ao consultar IBGE", url=url, error=str(ex))
            raise LocalityNetworkException(
                f"IBGE request failed: {str(ex)}",
                details={"url": url}
            ) from ex

        # JSON sem charset no Content-Type é UTF-8
        if response.encoding is None:
            response.encoding = "utf-8"

        return LocalityResponse(
            url=url,
            status_code=response.status_code,
            body=response.text
        )

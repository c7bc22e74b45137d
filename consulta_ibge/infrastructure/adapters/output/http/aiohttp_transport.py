"""
Output Adapter: Transporte assíncrono com aiohttp
Abre uma ClientSession por chamada (sem pool compartilhado)
"""
import asyncio
from typing import Union

import aiohttp

from consulta_ibge.application.ports.output.locality_transport_port import IAsyncLocalityTransport
from consulta_ibge.domain.constants import API
from consulta_ibge.domain.exceptions import LocalityNetworkException
from consulta_ibge.domain.value_objects.locality_response import LocalityResponse
from consulta_ibge.shared.config.logger_config import get_logger

logger = get_logger(child=True)

_DEFAULT = object()


class AiohttpLocalityTransport(IAsyncLocalityTransport):
    """Transporte HTTP assíncrono para uso com AsyncLocalityClient"""

    def __init__(self, timeout: Union[float, None, object] = _DEFAULT):
        """
        Args:
            timeout: Timeout total em segundos (None = ClientTimeout padrão; omitido usa API.HTTP_TIMEOUT)
        """
        self.timeout = API.HTTP_TIMEOUT if timeout is _DEFAULT else timeout

    def _client_timeout(self) -> aiohttp.ClientTimeout:
        if self.timeout is None:
            return aiohttp.ClientTimeout()
        return aiohttp.ClientTimeout(total=self.timeout)

    async def get(self, url: str) -> LocalityResponse:
        try:
            async with aiohttp.ClientSession(timeout=self._client_timeout()) as session:
                async with session.get(url) as response:
                    status = response.status
                    body = await response.text(encoding=response.charset or "utf-8", errors="replace")
        except (aiohttp.ClientError, asyncio.TimeoutError) as ex:
            logger.warning("Falha de rede ao consultar IBGE", url=url, error=str(ex))
            raise LocalityNetworkException(
                f"IBGE request failed: {str(ex)}",
                details={"url": url}
            ) from ex

        return LocalityResponse(url=url, status_code=status, body=body)

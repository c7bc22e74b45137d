"""
Locality Client
Consulta estados e distritos no serviço de localidades do IBGE
e devolve o corpo da resposta sem interpretação
"""
from typing import Optional, Union

from ddtrace import tracer

from consulta_ibge.application.ports.output.locality_transport_port import (
    IAsyncLocalityTransport,
    ILocalityTransport,
)
from consulta_ibge.domain.constants import API, Locality
from consulta_ibge.domain.exceptions import LocalityRemoteException
from consulta_ibge.domain.value_objects import DistrictId, LocalityResponse, StateCode
from consulta_ibge.shared.config import settings
from consulta_ibge.shared.config.logger_config import get_logger

logger = get_logger(child=True)

StateCodeInput = Union[str, StateCode]
DistrictIdInput = Union[int, str, DistrictId]


def _build_url(base_url: str, segment: str) -> str:
    return f"{base_url.rstrip('/')}/{segment}"


class _LocalityUrls:
    """Montagem de URLs compartilhada entre os clientes sync e async"""

    def __init__(
        self,
        estados_url: Optional[str] = None,
        distritos_url: Optional[str] = None,
        raise_for_status: Optional[bool] = None
    ):
        self.estados_url = estados_url or API.ESTADOS_URL
        self.distritos_url = distritos_url or API.DISTRITOS_URL
        if raise_for_status is None:
            raise_for_status = settings.IBGE_RAISE_FOR_STATUS
        self.raise_for_status = raise_for_status

    def state_url(self, code: StateCodeInput) -> str:
        return _build_url(self.estados_url, StateCode.of(code).to_path_segment())

    def district_url(self, district_id: DistrictIdInput) -> str:
        return _build_url(self.distritos_url, DistrictId.of(district_id).to_path_segment())

    def body_of(self, response: LocalityResponse, resource: str) -> str:
        """Aplica a política de status e devolve o corpo"""
        logger.debug(
            "Resposta do IBGE recebida",
            resource=resource,
            url=response.url,
            status=response.status_code
        )
        if self.raise_for_status and not response.ok:
            raise LocalityRemoteException(
                f"IBGE returned status {response.status_code}",
                status_code=response.status_code,
                details={"url": response.url, "resource": resource}
            )
        return response.body


class LocalityClient(_LocalityUrls):
    """
    Cliente síncrono do serviço de localidades

    Cada chamada faz exatamente um GET pelo transporte injetado, sem cache
    e sem retries. Por padrão o corpo é devolvido qualquer que seja o status
    HTTP; use get_*_status para inspecionar o status ou raise_for_status=True
    para receber LocalityRemoteException em respostas não-2xx.

    Uso:
        client = LocalityClient()
        body = client.fetch_state("MG")
        data = json.loads(body)
    """

    def __init__(
        self,
        transport: Optional[ILocalityTransport] = None,
        estados_url: Optional[str] = None,
        distritos_url: Optional[str] = None,
        raise_for_status: Optional[bool] = None
    ):
        super().__init__(estados_url, distritos_url, raise_for_status)
        if transport is None:
            from consulta_ibge.infrastructure.adapters.output.http import RequestsLocalityTransport
            transport = RequestsLocalityTransport()
        self.transport = transport

    @tracer.wrap(name="ibge.fetch_state", resource="ibge.fetch_state")
    def fetch_state(self, code: StateCodeInput) -> str:
        """
        Busca um estado pela sigla

        Args:
            code: Sigla da UF (ex.: "SP")

        Returns:
            Corpo da resposta (JSON em texto, sem parsing)

        Raises:
            InvalidStateCodeException: sigla vazia
            LocalityNetworkException: falha de conexão
            LocalityRemoteException: status não-2xx com raise_for_status ligado
        """
        response = self.transport.get(self.state_url(code))
        return self.body_of(response, Locality.STATE)

    @tracer.wrap(name="ibge.fetch_district", resource="ibge.fetch_district")
    def fetch_district(self, district_id: DistrictIdInput) -> str:
        """Busca um distrito pelo identificador numérico (mesmo contrato de fetch_state)"""
        response = self.transport.get(self.district_url(district_id))
        return self.body_of(response, Locality.DISTRICT)

    @tracer.wrap(name="ibge.get_state_status", resource="ibge.get_state_status")
    def get_state_status(self, code: StateCodeInput) -> int:
        """Executa o GET do estado e devolve apenas o status HTTP"""
        return self.transport.get(self.state_url(code)).status_code

    @tracer.wrap(name="ibge.get_district_status", resource="ibge.get_district_status")
    def get_district_status(self, district_id: DistrictIdInput) -> int:
        return self.transport.get(self.district_url(district_id)).status_code


class AsyncLocalityClient(_LocalityUrls):
    """Versão assíncrona de LocalityClient para chamadas concorrentes"""

    def __init__(
        self,
        transport: Optional[IAsyncLocalityTransport] = None,
        estados_url: Optional[str] = None,
        distritos_url: Optional[str] = None,
        raise_for_status: Optional[bool] = None
    ):
        super().__init__(estados_url, distritos_url, raise_for_status)
        if transport is None:
            from consulta_ibge.infrastructure.adapters.output.http import AiohttpLocalityTransport
            transport = AiohttpLocalityTransport()
        self.transport = transport

    @tracer.wrap(name="ibge.async_fetch_state", resource="ibge.async_fetch_state")
    async def fetch_state(self, code: StateCodeInput) -> str:
        response = await self.transport.get(self.state_url(code))
        return self.body_of(response, Locality.STATE)

    @tracer.wrap(name="ibge.async_fetch_district", resource="ibge.async_fetch_district")
    async def fetch_district(self, district_id: DistrictIdInput) -> str:
        response = await self.transport.get(self.district_url(district_id))
        return self.body_of(response, Locality.DISTRICT)

    @tracer.wrap(name="ibge.async_get_state_status", resource="ibge.async_get_state_status")
    async def get_state_status(self, code: StateCodeInput) -> int:
        response = await self.transport.get(self.state_url(code))
        return response.status_code

    @tracer.wrap(name="ibge.async_get_district_status", resource="ibge.async_get_district_status")
    async def get_district_status(self, district_id: DistrictIdInput) -> int:
        response = await self.transport.get(self.district_url(district_id))
        return response.status_code

"""
Testes para LocalityClient (transporte fake, sem rede)
"""
import pytest

from consulta_ibge.application.services.locality_client import LocalityClient, _build_url
from consulta_ibge.domain.exceptions import (
    InvalidDistrictIdException,
    InvalidStateCodeException,
    LocalityNetworkException,
    LocalityRemoteException,
)
from consulta_ibge.infrastructure.adapters.output.http import RequestsLocalityTransport

ESTADOS_API_URL = "https://servicodados.ibge.gov.br/api/v1/localidades/estados/"
DISTRITOS_API_URL = "https://servicodados.ibge.gov.br/api/v1/localidades/distritos/"


class TestBuildUrl:

    def test_joins_with_single_slash(self):
        assert _build_url(ESTADOS_API_URL, "SP") == ESTADOS_API_URL + "SP"
        assert _build_url(ESTADOS_API_URL.rstrip("/"), "SP") == ESTADOS_API_URL + "SP"


class TestFetchState:

    def test_returns_mocked_body_unmodified(self, make_transport, json_response):
        """Corpo do transporte deve sair byte a byte igual"""
        transport = make_transport()
        client = LocalityClient(transport=transport)

        assert client.fetch_state("MG") == json_response

    def test_builds_state_url(self, make_transport):
        transport = make_transport()
        client = LocalityClient(transport=transport)

        client.fetch_state("SP")

        assert transport.calls == [ESTADOS_API_URL + "SP"]

    def test_one_request_per_call(self, make_transport):
        transport = make_transport()
        client = LocalityClient(transport=transport)

        client.fetch_state("SP")
        client.fetch_state("RJ")

        assert transport.calls == [ESTADOS_API_URL + "SP", ESTADOS_API_URL + "RJ"]

    def test_body_returned_on_error_status_by_default(self, make_transport):
        transport = make_transport(body='{"erro": true}', status_code=404)
        client = LocalityClient(transport=transport, raise_for_status=False)

        assert client.fetch_state("XX") == '{"erro": true}'

    def test_raise_for_status_opt_in(self, make_transport):
        transport = make_transport(body="", status_code=503)
        client = LocalityClient(transport=transport, raise_for_status=True)

        with pytest.raises(LocalityRemoteException) as exc_info:
            client.fetch_state("SP")

        assert exc_info.value.status_code == 503
        assert exc_info.value.details["status"] == 503
        assert exc_info.value.details["url"] == ESTADOS_API_URL + "SP"

    def test_raise_for_status_passes_success(self, make_transport, json_response):
        client = LocalityClient(transport=make_transport(), raise_for_status=True)

        assert client.fetch_state("MG") == json_response

    def test_empty_code_never_hits_transport(self, make_transport):
        transport = make_transport()
        client = LocalityClient(transport=transport)

        with pytest.raises(InvalidStateCodeException):
            client.fetch_state("")

        assert transport.calls == []

    def test_network_error_propagates(self, make_transport):
        error = LocalityNetworkException("IBGE request failed: boom")
        client = LocalityClient(transport=make_transport(error=error))

        with pytest.raises(LocalityNetworkException) as exc_info:
            client.fetch_state("SP")

        assert exc_info.value is error

    def test_custom_base_url(self, make_transport):
        transport = make_transport()
        client = LocalityClient(transport=transport, estados_url="http://localhost:8080/estados")

        client.fetch_state("SP")

        assert transport.calls == ["http://localhost:8080/estados/SP"]


class TestFetchDistrict:

    def test_builds_district_url(self, make_transport, json_response):
        transport = make_transport()
        client = LocalityClient(transport=transport)

        result = client.fetch_district(520005005)

        assert result == json_response
        assert transport.calls == [DISTRITOS_API_URL + "520005005"]

    def test_accepts_numeric_string(self, make_transport):
        transport = make_transport()
        client = LocalityClient(transport=transport)

        client.fetch_district("310010405")

        assert transport.calls == [DISTRITOS_API_URL + "310010405"]

    def test_invalid_id_never_hits_transport(self, make_transport):
        transport = make_transport()
        client = LocalityClient(transport=transport)

        with pytest.raises(InvalidDistrictIdException):
            client.fetch_district(0)

        assert transport.calls == []

    def test_superscript_digit_raises_domain_error(self, make_transport):
        transport = make_transport()
        client = LocalityClient(transport=transport)

        with pytest.raises(InvalidDistrictIdException):
            client.fetch_district("²")

        assert transport.calls == []


class TestStatus:

    def test_state_status(self, make_transport):
        client = LocalityClient(transport=make_transport(status_code=200))
        assert client.get_state_status("SP") == 200

    def test_district_status_does_not_raise(self, make_transport):
        client = LocalityClient(transport=make_transport(status_code=500), raise_for_status=True)
        assert client.get_district_status(520005005) == 500


class TestDefaultTransport:

    def test_uses_requests_transport(self):
        client = LocalityClient()
        assert isinstance(client.transport, RequestsLocalityTransport)

    def test_malformed_url_raises_network_error(self):
        """URL sem esquema falha no requests antes de qualquer conexão"""
        client = LocalityClient(estados_url="sem-esquema/estados")

        with pytest.raises(LocalityNetworkException):
            client.fetch_state("SP")


class TestTracing:

    def test_wrapped_methods_emit_no_ddtrace_deprecation(self, make_transport):
        """Spans nomeados explicitamente: nenhum aviso de nome padrão do ddtrace"""
        import importlib
        import warnings

        from consulta_ibge.application.services import locality_client

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            module = importlib.reload(locality_client)
            client = module.LocalityClient(transport=make_transport())
            client.fetch_state("SP")
            client.fetch_district(520005005)
            client.get_state_status("SP")
            client.get_district_status(520005005)

        names = [w.category.__name__ for w in caught]
        assert "DDTraceDeprecationWarning" not in names

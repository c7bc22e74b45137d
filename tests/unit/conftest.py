"""
Configurações e fixtures compartilhadas para testes unitários
"""
import pytest

from consulta_ibge.domain.value_objects.locality_response import LocalityResponse

JSON_RESPONSE = (
    '{"id":31,"sigla":"MG","nome":"Minas Gerais",'
    '"regiao":{"id":3,"sigla":"SE","nome":"Sudeste"}}'
)


class FakeTransport:
    """Transporte fake: devolve sempre o mesmo corpo/status e registra as URLs"""

    def __init__(self, body: str = JSON_RESPONSE, status_code: int = 200, error: Exception = None):
        self.body = body
        self.status_code = status_code
        self.error = error
        self.calls = []

    def get(self, url):
        self.calls.append(url)
        if self.error:
            raise self.error
        return LocalityResponse(url=url, status_code=self.status_code, body=self.body)


class FakeAsyncTransport(FakeTransport):
    async def get(self, url):
        return FakeTransport.get(self, url)


@pytest.fixture
def json_response():
    """Payload fixo de Minas Gerais"""
    return JSON_RESPONSE


@pytest.fixture
def make_transport():
    """
    Factory fixture para FakeTransport
    
    Usage:
        def test_something(make_transport):
            transport = make_transport(status_code=404)
    """
    return FakeTransport


@pytest.fixture
def make_async_transport():
    return FakeAsyncTransport

"""Resposta bruta de uma consulta ao serviço de localidades"""
from dataclasses import dataclass


@dataclass(frozen=True)
class LocalityResponse:
    url: str
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

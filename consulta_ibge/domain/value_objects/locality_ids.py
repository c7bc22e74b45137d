"""
Value Objects para identificadores de localidade
Garantem validação antes de qualquer chamada de rede
"""
from dataclasses import dataclass
from typing import Union

from consulta_ibge.domain.exceptions import InvalidDistrictIdException, InvalidStateCodeException
from consulta_ibge.shared.utils.validators import GenericValidator


@dataclass(frozen=True)
class StateCode:
    """
    Sigla de unidade federativa (ex.: "SP")

    O valor é usado literalmente como segmento de URL; a única regra é
    não ser vazio.
    """
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise InvalidStateCodeException(
                "state code must be a string",
                details={"state_code": self.value}
            )
        GenericValidator.validate_not_empty(
            self.value, "state_code", InvalidStateCodeException
        )

    @classmethod
    def of(cls, code: Union[str, 'StateCode']) -> 'StateCode':
        """Aceita string ou StateCode já construído"""
        if isinstance(code, cls):
            return code
        return cls(code)

    def to_path_segment(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DistrictId:
    """Identificador numérico de distrito (ex.: 520005005)"""
    value: int

    def __post_init__(self):
        GenericValidator.validate_positive_int(
            self.value, "district_id", InvalidDistrictIdException
        )

    @classmethod
    def of(cls, district_id: Union[int, str, 'DistrictId']) -> 'DistrictId':
        """
        Aceita int, string numérica ou DistrictId

        Raises:
            InvalidDistrictIdException: se não for inteiro positivo
        """
        if isinstance(district_id, cls):
            return district_id
        if isinstance(district_id, str):
            digits = GenericValidator.validate_numeric_string(
                district_id, "district_id", InvalidDistrictIdException
            )
            return cls(int(digits))
        return cls(district_id)

    def to_path_segment(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return str(self.value)

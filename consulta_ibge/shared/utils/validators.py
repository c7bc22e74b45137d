"""
Validators Utility
Input validation with domain exceptions
"""
from typing import Any, Type


class GenericValidator:
    """Validador genérico para reduzir duplicação de código"""
    
    @staticmethod
    def validate_not_empty(
        value: str,
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> str:
        """
        Valida se string não está vazia
        
        Args:
            value: String a validar
            param_name: Nome do parâmetro (para mensagem de erro)
            exception_class: Classe de exceção a lançar
        
        Returns:
            String validada (sem alteração)
        
        Raises:
            exception_class: Se string vazia
        """
        if not value or not value.strip():
            raise exception_class(
                f"{param_name} cannot be empty",
                details={param_name: value}
            )
        return value
    
    @staticmethod
    def validate_numeric_string(
        value: str,
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> str:
        """
        Valida se string é numérica
        
        Returns:
            String validada e trimmed
        
        Raises:
            exception_class: Se não for numérica
        """
        trimmed = GenericValidator.validate_not_empty(value, param_name, exception_class).strip()
        if not trimmed.isdecimal():
            raise exception_class(
                f"Invalid {param_name} format: {value}",
                details={param_name: value}
            )
        return trimmed
    
    @staticmethod
    def validate_positive_int(
        value: Any,
        param_name: str,
        exception_class: Type[Exception] = ValueError
    ) -> int:
        """
        Valida se valor é inteiro maior que zero (bool não conta como inteiro)
        
        Raises:
            exception_class: Se não for inteiro positivo
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise exception_class(
                f"{param_name} must be an integer",
                details={param_name: value}
            )
        if value <= 0:
            raise exception_class(
                f"{param_name} must be positive",
                details={param_name: value}
            )
        return value

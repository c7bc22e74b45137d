"""
Configurações centralizadas da aplicação
"""
import os
from typing import Optional


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    return float(raw)


# Serviço de localidades do IBGE
IBGE_LOCALIDADES_BASE_URL = os.environ.get(
    'IBGE_LOCALIDADES_BASE_URL',
    'https://servicodados.ibge.gov.br/api/v1/localidades'
)

# Timeout HTTP (segundos). Vazio = padrão do transporte
IBGE_HTTP_TIMEOUT = _parse_timeout(os.environ.get('IBGE_HTTP_TIMEOUT'))

# Status != 2xx: False devolve o corpo mesmo assim
IBGE_RAISE_FOR_STATUS = os.environ.get('IBGE_RAISE_FOR_STATUS', 'false').lower() in ('true', '1', 'yes')

# Logging
SERVICE_NAME = os.environ.get('IBGE_SERVICE_NAME') or os.environ.get('DD_SERVICE', 'consulta-ibge')

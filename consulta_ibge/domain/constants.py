"""
Domain Constants - URLs do serviço de localidades do IBGE
"""
from consulta_ibge.shared.config import settings


class API:
    """Constantes de APIs externas"""

    # IBGE Localidades
    IBGE_LOCALIDADES_BASE_URL = settings.IBGE_LOCALIDADES_BASE_URL.rstrip("/")
    ESTADOS_URL = f"{IBGE_LOCALIDADES_BASE_URL}/estados/"
    DISTRITOS_URL = f"{IBGE_LOCALIDADES_BASE_URL}/distritos/"

    # None = timeout padrão do transporte
    HTTP_TIMEOUT = settings.IBGE_HTTP_TIMEOUT


class Locality:
    """Constantes de recursos de localidade"""

    STATE = "estado"
    DISTRICT = "distrito"

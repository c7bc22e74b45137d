"""HTTP transports"""
from .requests_transport import RequestsLocalityTransport
from .aiohttp_transport import AiohttpLocalityTransport

__all__ = ['RequestsLocalityTransport', 'AiohttpLocalityTransport']

"""Output ports"""
from .locality_transport_port import ILocalityTransport, IAsyncLocalityTransport

__all__ = ['ILocalityTransport', 'IAsyncLocalityTransport']

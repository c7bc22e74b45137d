"""Application services"""
from .locality_client import LocalityClient, AsyncLocalityClient

__all__ = ['LocalityClient', 'AsyncLocalityClient']

"""Shared configuration"""
from . import settings
from .logger_config import get_logger, logger

__all__ = ['settings', 'get_logger', 'logger']

"""
Utility functions package
"""
from .logger import setup_logger, mask, server_logger, auth_logger

__all__ = ['setup_logger', 'mask', 'server_logger', 'auth_logger']

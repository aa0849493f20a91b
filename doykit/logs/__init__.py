# doykit/logs/__init__.py

from .logger import get_logger

__all__ = ['get_logger']

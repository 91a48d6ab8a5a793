# HTTP Package
from .backend_client import HttpJobBackend

__all__ = ["HttpJobBackend"]

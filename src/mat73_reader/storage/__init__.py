from .h5_store import H5MatStore
from .interfaces import MatStore

__all__ = ["MatStore", "H5MatStore"]

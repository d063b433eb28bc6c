from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional

from .config import ReaderConfig
from .decoder import read_array, read_struct
from .element_types import ElementKind
from .exceptions import OpenError
from .storage.h5_store import H5MatStore
from .storage.interfaces import MatStore
from .variables import StructDescriptor, TypedArray

logger = logging.getLogger(__name__)

HEADER_SIZE = 128


def verify_mat_header(path: str | Path) -> None:
    """
    Check the 128-byte Matlab header Matlab writes into the HDF5 user block.
    Raises ValueError if it is missing or not a v7.3 header.
    """
    with open(path, "rb") as fh:
        header = fh.read(HEADER_SIZE)
    if len(header) != HEADER_SIZE or not header.startswith(b"MATLAB"):
        raise ValueError("missing Matlab header")
    endian = header[126:128]
    if endian not in (b"IM", b"MI"):
        raise ValueError(f"bad endian indicator {endian!r}")
    version = (header[125], header[124])
    if endian == b"MI":
        version = version[::-1]
    if version[0] != 2:
        raise ValueError(f"not a v7.3 MAT-file (version {version[0]}.{version[1]})")


class MatFile:
    """
    An open Matlab 7.3 file. Read-only; no caching, every lookup re-reads
    the store. Not thread-safe: use one handle per thread.
    """

    def __init__(self, store: MatStore, config: Optional[ReaderConfig] = None):
        self.store = store
        self.config = config or ReaderConfig()
        self._closed = False

    @classmethod
    def open(cls,
             path: str | Path,
             config: Optional[ReaderConfig] = None) -> "MatFile":
        config = config or ReaderConfig()
        path = Path(path)
        try:
            store = H5MatStore.open(path, **config.h5py_kwargs())
        except (OSError, ValueError) as e:
            raise OpenError(path) from e

        if config.verify_header:
            try:
                verify_mat_header(path)
            except (OSError, ValueError) as e:
                store.close()
                raise OpenError(path, "not a Matlab 7.3 MAT-file") from e

        return cls(store, config)

    @property
    def path(self) -> Path:
        return self.store.path

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("I/O operation on closed MatFile")

    def array(self, name: str, kind: Optional[Any] = None) -> TypedArray:
        """Read a Matlab numeric array (see decoder.read_array)."""
        self._check_open()
        return read_array(self, name,
                          self.config.default_kind if kind is None else kind)

    def struct(self, name: str) -> StructDescriptor:
        """Read a Matlab struct's field names (see decoder.read_struct)."""
        self._check_open()
        return read_struct(self, name)

    def variables(self) -> List[str]:
        """Top-level names, without Matlab's internal '#refs#'-style entries."""
        self._check_open()
        return [n for n in self.store.member_names() if not n.startswith("#")]

    def __contains__(self, name: object) -> bool:
        self._check_open()
        return isinstance(name, str) and name in self.store.member_names()

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self.store.close()

    def __enter__(self) -> "MatFile":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<MatFile {str(self.path)!r} ({state})>"


open_file = MatFile.open

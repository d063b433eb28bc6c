from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Sequence, Tuple

import h5py
import numpy as np

from .interfaces import MatStore

logger = logging.getLogger(__name__)


class H5MatStore(MatStore):
    """h5py-backed store: one read-only h5py.File per instance."""

    def __init__(self, path: str | Path, h5: h5py.File):
        self.path = Path(path)
        self._f = h5

    @classmethod
    def open(cls, path: str | Path, **h5py_kwargs: Any) -> "H5MatStore":
        """Open `path` read-only. h5py/OS errors propagate to the caller."""
        logger.debug("Opening HDF5 file %s (%s)", path, h5py_kwargs or "defaults")
        return cls(path, h5py.File(path, "r", **h5py_kwargs))

    # ---- lookup ----
    def resolve_dataset(self, name: str) -> h5py.Dataset:
        obj = self._f.get(name)
        if not isinstance(obj, h5py.Dataset):
            raise KeyError(
                f"'{name}' is not an HDF5 dataset (got {type(obj).__name__})")
        return obj

    def resolve_group(self, name: str) -> h5py.Group:
        obj = self._f.get(name)
        if not isinstance(obj, h5py.Group):
            raise KeyError(
                f"'{name}' is not an HDF5 group (got {type(obj).__name__})")
        return obj

    def object_name(self, handle: Any) -> str:
        return handle.name

    def member_names(self) -> List[str]:
        return sorted(self._f.keys())

    # ---- datasets ----
    def dataset_shape(self, dataset: h5py.Dataset) -> Tuple[int, ...]:
        return tuple(int(n) for n in dataset.shape)

    def read_raw(self, dataset: h5py.Dataset, dtype: np.dtype) -> np.ndarray:
        logger.debug("Reading %s %s as %s", dataset.name, dataset.shape, dtype)
        # HDF5 does the element conversion; the result keeps storage order
        values = dataset.astype(dtype)[()]
        return np.asarray(values, dtype=dtype).reshape(-1)

    # ---- attributes ----
    def read_attribute_scalar_ascii(self,
                                    group: h5py.Group,
                                    attr: str,
                                    capacity: int = 256) -> str:
        value = group.attrs[attr]
        if isinstance(value, np.ndarray):
            if value.size != 1:
                raise TypeError(
                    f"Attribute '{attr}' is not a scalar (shape {value.shape})")
            value = value.reshape(-1)[0]
        if isinstance(value, (bytes, np.bytes_)):
            text = bytes(value).rstrip(b"\0").decode("ascii")
        elif isinstance(value, str):
            text = value
            text.encode("ascii")
        else:
            raise TypeError(f"Attribute '{attr}' is not a string "
                            f"(got {type(value).__name__})")
        if len(text) > capacity:
            raise ValueError(f"Attribute '{attr}' exceeds {capacity} characters")
        return text

    def read_attribute_varlen_chars(self, group: h5py.Group,
                                    attr: str) -> List[Sequence[bytes]]:
        value = group.attrs[attr]
        items = np.asarray(value, dtype=object).reshape(-1)
        return [[bytes(c) for c in np.asarray(item).reshape(-1)]
                for item in items]

    def close(self) -> None:
        if self._f:
            logger.debug("Closing HDF5 file %s", self.path)
            self._f.close()

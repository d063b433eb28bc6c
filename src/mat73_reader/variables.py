from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from .element_types import ElementKind
from .exceptions import InvalidShapeError


@dataclass(frozen=True, eq=False)
class TypedArray:
    """
    One Matlab numeric array as stored in the file.

    `shape` is the HDF5 (storage) shape, which is Matlab's shape reversed:
    for a 2-D array shape[0] is the column count and shape[1] the row count.
    `data` is flat, in storage order, i.e. Matlab column-major.
    """
    name: str
    shape: Tuple[int, ...]
    data: np.ndarray
    kind: ElementKind = ElementKind.FLOAT64

    def __post_init__(self) -> None:
        kind = ElementKind.coerce(self.kind)
        shape = tuple(int(n) for n in self.shape)
        values = np.asarray(self.data)
        if values.size and not (
                values.dtype.kind in "biu" or
            (values.dtype.kind == "f" and kind.dtype.kind == "f")):
            # integer values convert across widths; floats only to floats
            raise TypeError(f"{self.name}: cannot store {values.dtype} data "
                            f"as {kind.value}")
        data = np.array(values, dtype=kind.dtype).reshape(-1)
        if data.size != math.prod(shape):
            raise ValueError(f"{self.name}: {data.size} elements do not fill "
                             f"shape {shape}")
        data.flags.writeable = False
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "shape", shape)
        object.__setattr__(self, "data", data)

    @property
    def ndim(self) -> int:
        return len(self.shape)

    @property
    def n_row(self) -> int:
        self._require_2d("n_row")
        return self.shape[1]

    @property
    def n_column(self) -> int:
        self._require_2d("n_column")
        return self.shape[0]

    def _require_2d(self, operation: str) -> None:
        if len(self.shape) != 2:
            raise InvalidShapeError(self.shape, operation)

    # ---- conversions ----
    def raw(self) -> np.ndarray:
        """Writable flat copy of the elements, column-major."""
        return self.data.copy()

    def tolist(self) -> List:
        return self.data.tolist()

    def to_matrix(self) -> np.ndarray:
        """Dense (n_row, n_column) matrix filled column-major from `data`."""
        self._require_2d("to_matrix")
        return self.data.reshape((self.n_row, self.n_column), order="F").copy()

    def __len__(self) -> int:
        return self.data.size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedArray):
            return NotImplemented
        return (self.name == other.name and self.shape == other.shape
                and self.data.dtype == other.data.dtype
                and bool(np.array_equal(self.data, other.data)))

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True)
class StructDescriptor:
    """Field names of a Matlab struct, in MATLAB_fields order."""
    name: str
    field_names: Tuple[str, ...]

    def __post_init__(self) -> None:
        names = tuple(self.field_names)
        for i, field in enumerate(names):
            if not field:
                raise ValueError(f"{self.name}: field {i} has an empty name")
        object.__setattr__(self, "field_names", names)

    def __len__(self) -> int:
        return len(self.field_names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.field_names)

    def __contains__(self, field: object) -> bool:
        return field in self.field_names

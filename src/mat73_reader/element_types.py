from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np


class ElementKind(str, Enum):
    """Fixed-width numeric element types a Matlab array can be read as."""

    FLOAT64 = "float64"
    FLOAT32 = "float32"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.value)

    @classmethod
    def coerce(cls, value: Any) -> "ElementKind":
        """
        Convert a kind name, numpy dtype or numpy scalar type to an ElementKind.
        Raises ValueError for anything outside the supported set.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        elif value is not None:  # np.dtype(None) is float64
            try:
                dt = np.dtype(value)
            except TypeError:
                dt = None
            if dt is not None and dt.isnative:
                try:
                    return cls(dt.name)
                except ValueError:
                    pass
        supported = ", ".join(k.value for k in cls)
        raise ValueError(
            f"Unsupported element kind {value!r} (expected one of: {supported})")

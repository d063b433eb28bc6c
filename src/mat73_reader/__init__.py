"""
mat73-reader - read numeric arrays and struct field names from Matlab 7.3
(HDF5-based) MAT-files.

    with open_file("arrays.mat") as mat:
        q = mat.array("q")              # TypedArray, float64 by default
        w = mat.array("w").to_matrix()  # (rows, columns) numpy array
        s = mat.struct("s").field_names
"""

__version__ = "0.1.0"

from .config import ReaderConfig
from .decoder import read_array, read_struct
from .element_types import ElementKind
from .exceptions import (DatasetError, GroupError, InvalidShapeError,
                         Mat73Error, NotAStructError, OpenError, StructError)
from .file import MatFile, open_file
from .variables import StructDescriptor, TypedArray

__all__ = [
    "open_file",
    "MatFile",
    "read_array",
    "read_struct",
    "TypedArray",
    "StructDescriptor",
    "ElementKind",
    "ReaderConfig",
    "Mat73Error",
    "OpenError",
    "DatasetError",
    "StructError",
    "GroupError",
    "NotAStructError",
    "InvalidShapeError",
]

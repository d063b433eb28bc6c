# mat73_reader/exceptions.py
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class Mat73Error(Exception):
    """Base class for Matlab 7.3 decoding failures."""


class OpenError(Mat73Error):
    """Failed to open the backing HDF5 file."""

    def __init__(self, path: str | Path, reason: Optional[str] = None):
        self.path = Path(path)
        self.reason = reason
        super().__init__(path, reason)

    def __str__(self) -> str:
        msg = f"Opening Matlab file '{self.path}' failed"
        if self.reason:
            msg += f": {self.reason}"
        cause = self.__cause__
        if cause is not None:
            msg += f" ({type(cause).__name__}: {cause})"
        return msg


class DatasetError(Mat73Error):
    """No readable dataset with the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Loading {self.name} dataset failed"


class StructError(Mat73Error):
    """Failed to decode a Matlab struct."""


class GroupError(StructError):
    """No readable group with the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Loading {self.name} group failed"


class NotAStructError(StructError):
    """The group exists but its MATLAB_class is not 'struct'."""

    def __init__(self, name: str, matlab_class: Optional[str] = None):
        self.name = name
        self.matlab_class = matlab_class
        super().__init__(name, matlab_class)

    def __str__(self) -> str:
        if self.matlab_class is None:
            return f"{self.name} is not a Matlab struct (no MATLAB_class)"
        return (f"{self.name} is not a Matlab struct "
                f"(MATLAB_class={self.matlab_class!r})")


class InvalidShapeError(Mat73Error):
    """Operation needs a 2-D array."""

    def __init__(self, shape: Sequence[int], operation: str):
        self.shape = tuple(shape)
        self.operation = operation
        super().__init__(self.shape, operation)

    def __str__(self) -> str:
        return (f"{self.operation} requires a 2-D Matlab array, "
                f"got shape {self.shape}")

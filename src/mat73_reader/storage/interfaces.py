# storage/interfaces.py
from __future__ import annotations

from pathlib import Path
from typing import Any, List, Protocol, Sequence, Tuple

import numpy as np


class MatStore(Protocol):
    """
    Read-only capabilities the Matlab decoder needs from an HDF5 binding.

    Lookups raise KeyError when the name does not resolve to an object of
    the requested type. Handles are opaque to the decoder.
    """

    path: Path

    def resolve_dataset(self, name: str) -> Any:
        ...

    def resolve_group(self, name: str) -> Any:
        ...

    def object_name(self, handle: Any) -> str:
        ...

    def dataset_shape(self, dataset: Any) -> Tuple[int, ...]:
        ...

    def read_raw(self, dataset: Any, dtype: np.dtype) -> np.ndarray:
        ...

    def read_attribute_scalar_ascii(self,
                                    group: Any,
                                    attr: str,
                                    capacity: int = 256) -> str:
        ...

    def read_attribute_varlen_chars(self, group: Any,
                                    attr: str) -> List[Sequence[bytes]]:
        ...

    def member_names(self) -> List[str]:
        ...

    def close(self) -> None:
        ...

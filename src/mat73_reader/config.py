from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .element_types import ElementKind


class ReaderConfig(BaseModel):
    """
    Options for opening Matlab 7.3 files.

    reader:
      default_kind: float64
      verify_header: false
      locking: null
      rdcc_nbytes: null
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    default_kind: ElementKind = ElementKind.FLOAT64
    verify_header: bool = False
    locking: Optional[bool] = None  # h5py file locking, None = library default
    rdcc_nbytes: Optional[int] = Field(default=None, gt=0)

    def h5py_kwargs(self) -> dict:
        kwargs: dict = {}
        if self.locking is not None:
            kwargs["locking"] = self.locking
        if self.rdcc_nbytes is not None:
            kwargs["rdcc_nbytes"] = self.rdcc_nbytes
        return kwargs

    @classmethod
    def from_yaml(cls,
                  path: Union[str, Path],
                  root_key: Union[str, None] = "reader") -> "ReaderConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        if root_key:
            if not isinstance(data, dict):
                raise ValueError(f"{path} does not contain a YAML mapping.")
            data = data.get(root_key, {}) or {}
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid reader configuration in {path}:\n{e}") from e

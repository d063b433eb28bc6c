"""
Matlab-on-HDF5 decoding.

Matlab 7.3 stores numeric arrays as HDF5 datasets (transposed, so the raw
element order is Matlab's column-major order) and structs as HDF5 groups
tagged with a MATLAB_class="struct" attribute and an ordered MATLAB_fields
attribute listing the field names as variable-length character arrays.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Union

from .element_types import ElementKind
from .exceptions import (DatasetError, GroupError, NotAStructError,
                         StructError)
from .variables import StructDescriptor, TypedArray

if TYPE_CHECKING:
    from .file import MatFile

logger = logging.getLogger(__name__)

STRUCT_CLASS = "struct"
CLASS_ATTR = "MATLAB_class"
FIELDS_ATTR = "MATLAB_fields"
CLASS_ATTR_CAPACITY = 256

# What a failed name lookup may raise (h5py: KeyError for missing or wrong
# object type, ValueError/TypeError for malformed names).
_LOOKUP_ERRORS = (KeyError, ValueError, TypeError, OSError)


def read_array(handle: "MatFile",
               name: str,
               kind: Union[ElementKind, Any] = ElementKind.FLOAT64) -> TypedArray:
    """
    Read the dataset `name` as a flat array of `kind` elements.

    Raises DatasetError(name) if no dataset resolves from `name`; errors
    raised while reading the elements themselves propagate unchanged.
    """
    kind = ElementKind.coerce(kind)
    handle._check_open()
    store = handle.store
    try:
        dataset = store.resolve_dataset(name)
    except _LOOKUP_ERRORS:
        raise DatasetError(name) from None

    shape = store.dataset_shape(dataset)
    data = store.read_raw(dataset, kind.dtype)
    logger.debug("Decoded array %s shape=%s kind=%s", name, shape, kind.value)
    return TypedArray(name=store.object_name(dataset),
                      shape=shape,
                      data=data,
                      kind=kind)


def read_struct(handle: "MatFile", name: str) -> StructDescriptor:
    """
    Read the field names of the Matlab struct stored as group `name`.

    Raises GroupError(name) if the group does not exist and NotAStructError
    if its MATLAB_class is missing or not "struct". Other attribute read
    failures propagate unchanged.
    """
    handle._check_open()
    store = handle.store
    try:
        group = store.resolve_group(name)
    except _LOOKUP_ERRORS:
        raise GroupError(name) from None

    try:
        matlab_class = store.read_attribute_scalar_ascii(
            group, CLASS_ATTR, capacity=CLASS_ATTR_CAPACITY)
    except KeyError:
        raise NotAStructError(name) from None
    if matlab_class != STRUCT_CLASS:
        raise NotAStructError(name, matlab_class)

    field_names = []
    for i, chars in enumerate(
            store.read_attribute_varlen_chars(group, FIELDS_ATTR)):
        field = b"".join(chars).decode("ascii")
        if not field:
            raise StructError(f"{name}: field {i} of {FIELDS_ATTR} is empty")
        field_names.append(field)

    logger.debug("Decoded struct %s with %d fields", name, len(field_names))
    return StructDescriptor(name=store.object_name(group),
                            field_names=tuple(field_names))

# custom_types.py
"""
Type aliases shared across probviz.

We generally follow the conventions:
- Annotate function input with `ArrayLike`
- Annotate function output with `Array`
- Parameter values travel as a `ParameterSet` (name -> float)
"""
from __future__ import annotations
from typing import Mapping, TypeAlias

from numpy.typing import (
    NDArray as NumpyArray,
    ArrayLike as NumpyArrayLike
)

from numpy import floating as NumpyFloating

Array = NumpyArray
ArrayLike: TypeAlias = NumpyArrayLike
Float: TypeAlias = NumpyFloating
ParameterSet: TypeAlias = Mapping[str, float]

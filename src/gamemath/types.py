from __future__ import annotations

from typing import Iterable, Tuple, Union

from numpy import ndarray

# these empty comments are because of the autodocumentation

Number = Union[int, float]
""
Float3 = Tuple[float, float, float]
""
Int3 = Tuple[int, int, int]
""
Vec3Like = Union[Float3, Int3, ndarray, Iterable[Number]]
"""
Anything that can be turned into a :class:`gamemath.Vector3` with ``Vector3.from_iterable``:

    - ``(x, y, z)`` tuple or list of numbers,
    - ``NumPy`` array with three elements.
"""

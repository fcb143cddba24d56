from __future__ import annotations
from typing import Callable
from xxhash import xxh3_64_intdigest
import numpy as np


class Array(np.ndarray):
    """An ndarray subclass that can be hashed based on its contents.

    It can be constructed from any array-like object and viewed as a standard
    ndarray with the .view(np.ndarray) method. Pass ``mutable=False`` to get a
    read-only array, which is what the vertex views of a polyline hand out.

    >>> a = Array([1, 2, 3])
    >>> a[0] = 4
    >>> a
    Array([4, 2, 3])
    >>> b = Array([1, 2, 3], mutable=False)
    >>> b[0] = 4
    Traceback (most recent call last):
        ...
    ValueError: assignment destination is read-only
    """

    def __new__(cls, *args, mutable=True, **kwargs):
        self = np.array(*args, **kwargs).view(cls)
        if not mutable:
            self.flags.writeable = False
        return self

    def __array_wrap__(self, obj: np.ndarray, context=None, return_scalar=False):
        # numpy hands back a 0d array instead of a scalar for subclasses
        if obj.ndim:
            return np.ndarray.__array_wrap__(self, obj, context)
        return obj[()]

    def __array_finalize__(self, obj) -> None:
        if obj is None:
            return
        if hasattr(self, "_hash"):
            del self._hash

    def __hash__(self) -> int:
        if hasattr(self, "_hash"):
            return self._hash
        try:
            self._hash = xxh3_64_intdigest(self.data)
        except ValueError:  # xxhash requires contiguous memory
            self._hash = xxh3_64_intdigest(self.copy(order="C").data)
        return self._hash

    # wraps an in-place method so that it drops the cached hash first
    def invalidate(method: str) -> Callable:
        def f(self: Array, *args, **kwargs):
            if hasattr(self, "_hash"):
                del self._hash
            return getattr(super(Array, self), method)(*args, **kwargs)
        return f

    fill = invalidate("fill")
    put = invalidate("put")
    sort = invalidate("sort")
    __setitem__ = invalidate("__setitem__")
    __iadd__ = invalidate("__iadd__")
    __isub__ = invalidate("__isub__")
    __imul__ = invalidate("__imul__")
    __itruediv__ = invalidate("__itruediv__")

    del invalidate

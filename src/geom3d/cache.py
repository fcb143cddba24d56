from __future__ import annotations


class revision_cached(property):
    """A read-only property whose value is cached against the owner's `revision`.

    The first access evaluates the wrapped function and stores the result together
    with the revision it was computed at. Later accesses return the stored value
    until the owner's revision moves on, at which point it is recomputed.
    """

    def __init__(self, func):
        super().__init__(self._cached_getter(func))
        # instance doc, otherwise the class docstring shadows it
        self.__doc__ = func.__doc__

    def _cached_getter(self, func):
        name = func.__name__

        def wrapper(self):
            try:
                # attempt to get the cache from the object
                store = self._attributes
            except AttributeError:
                # if it doesn't exist, create it
                store = self._attributes = AttributeCache()
            try:
                revision, value = store[name]
            except KeyError:
                pass
            else:
                if revision == self.revision:
                    return value
            value = func(self)
            store[name] = (self.revision, value)
            return value

        return wrapper


class AttributeCache(dict):
    """Derived values keyed by attribute name, each stored as a (revision, value) pair."""

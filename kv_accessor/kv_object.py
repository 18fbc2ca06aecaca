# Copyright (C) DATADVANCE, 2010-2023
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
# CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
# SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""Value-style object wrapping a key-value container."""

from .accessor import KvAccessorMixin


class KvObject(KvAccessorMixin):
    """Value-style object wrapping a key-value container.

    Subclass it and expose the entries of the container with the
    generated attributes, the wrapped container is reachable through
    the `_asdict` method which serves as the delegate:
    ```
    class Car(KvObject):
        pass

    Car.kv_accessor("_asdict", "make", year="model_year")
    ```

    Unlike a dict subclass or a `types.SimpleNamespace`, attributes are
    not routed to the container: only the generated ones are.
    """

    def __init__(self, data=None):
        """Remember given `data`, use a new dict when it is `None`."""
        self._data = {} if data is None else data

    def _asdict(self):
        """Provide inner key-value container."""
        return self._data

    # ------------------------------------------------------- GENERIC ACCESS
    def get(self, key, default=None):
        """Value stored under `key` or `default` when there is none."""
        try:
            return self._data[key]
        except LookupError:
            return default

    def set(self, key, value):
        """Store the `value` under `key`."""
        self._data[key] = value

    # --------------------------------------------------------- DICT WRAPPER
    def __getitem__(self, key):
        """Wrap dict method."""
        return self._data[key]

    def __setitem__(self, key, value):
        """Wrap dict method."""
        self._data[key] = value

    def __delitem__(self, key):
        """Wrap dict method."""
        del self._data[key]

    def __contains__(self, item):
        """Wrap dict method."""
        return item in self._data

    def __iter__(self):
        """Wrap dict method."""
        return iter(self._data)

    def __len__(self):
        """Wrap dict method."""
        return len(self._data)

    def __eq__(self, other):
        """Objects are equal when their containers are."""
        if not isinstance(other, KvObject):
            return NotImplemented
        return self._data == other._data

    # Mutable, so not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __str__(self):
        """Wrap dict method."""
        return self._data.__str__()

    def __repr__(self):
        """Class name and the container."""
        return f"{type(self).__name__}({self._data!r})"

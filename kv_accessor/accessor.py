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

"""Reader and writer attributes backed by a key-value container.

Define attributes on a host class (or on a single object) which read
and write entries of a mapping-like object reachable through a named
delegate attribute of the host. Only the listed keys get attributes,
so the generated attributes form an explicit allow-list over the
container.

Use like this:
```
class Car:
    def __init__(self, details):
        self.details = details

CAR_ATTRIBUTES = kv_accessor(
    Car, "details", "make", year="model_year", cost=("leather", "blue")
)

car = Car({"make": "Chevrolet", "model_year": 1967})
car.year = 1968
assert car.details["model_year"] == 1968
```

Each generation function returns the accessor table: a dict mapping
the attribute name to the key it looks up. The table is meant to be
kept and composed, e.g. to filter the incoming data with `kv_select`.

The delegate is resolved on each access by `getattr(host, method)`. If
the resulting value is callable but not indexable itself (like a bound
method), it is called without arguments and the result is indexed.
Lookup errors of the container (`KeyError`, `IndexError`, etc.) are
never caught, they surface from the attribute access as is.
"""

import dataclasses
import keyword
import logging
import types
from typing import (
    Any,
    Dict,
    Hashable,
    Iterable,
    Mapping,
    Optional,
    Protocol,
    runtime_checkable,
)

# Module logger.
LOG = logging.getLogger(__name__)

# Names of the `KvField` slots, also used in the log messages.
READER = "reader"
WRITER = "writer"


@runtime_checkable
class SupportsGetItem(Protocol):
    """Container a reader attribute can take values from."""

    def __getitem__(self, key: Any) -> Any:
        """Return the value stored under `key`."""


@runtime_checkable
class SupportsSetItem(Protocol):
    """Container a writer attribute can store values to."""

    def __setitem__(self, key: Any, value: Any) -> None:
        """Store `value` under `key`."""


class KvAccessorConfigError(ValueError):
    """Attribute or delegate name which cannot be used as an attribute."""

    def __init__(self, name, reason):
        """Exception constructor."""
        super().__init__(name, reason)
        self.name = name
        self.reason = reason

    def __str__(self):
        """Nice string representation."""
        return f"Cannot define key-value accessor {self.name!r}: {self.reason}!"


@dataclasses.dataclass(frozen=True)
class _Slot:
    """Where one half of the `KvField` routes to: `host.<delegate>[key]`."""

    delegate: str
    key: Any


class KvField:
    """Data descriptor routing an attribute to a key-value container.

    The descriptor has two independent slots: `reader` and `writer`.
    Each of them is either `None` (the operation is not available) or
    remembers the delegate name and the key to use. Reading the
    attribute without a reader and assigning it without a writer raise
    `AttributeError` so `hasattr` reports write-only attributes as
    missing.
    """

    __slots__ = ("name", "reader", "writer")

    def __init__(
        self, name: str, reader: Optional[_Slot] = None, writer: Optional[_Slot] = None
    ):
        """Remember the attribute name and both slots."""
        self.name = name
        self.reader = reader
        self.writer = writer

    def __get__(self, instance, owner=None):
        """Read `instance.<delegate>[key]`, return the field itself for a class."""
        del owner
        if instance is None:
            return self
        reader = self.reader or self._inherited_slot(instance, READER)
        if reader is None:
            raise AttributeError(
                f"'{type(instance).__name__}' object attribute '{self.name}'"
                " is write-only"
            )
        return _delegate_target(instance, reader.delegate)[reader.key]

    def __set__(self, instance, value):
        """Assign `instance.<delegate>[key] = value`."""
        writer = self.writer or self._inherited_slot(instance, WRITER)
        if writer is None:
            raise AttributeError(
                f"'{type(instance).__name__}' object attribute '{self.name}'"
                " is read-only"
            )
        _delegate_target(instance, writer.delegate)[writer.key] = value

    def _inherited_slot(self, instance, slot_name) -> Optional[_Slot]:
        """Find the empty slot in the fields this one overrides.

        Slots are carried over when the field is defined, but a parent
        class may get its slot later, so the MRO past the class holding
        this field is searched on access. Any attribute other than
        `KvField` stops the search.
        """
        mro = iter(type(instance).__mro__)
        for klass in mro:
            if klass.__dict__.get(self.name) is self:
                break
        for klass in mro:
            if self.name not in klass.__dict__:
                continue
            field = klass.__dict__[self.name]
            if not isinstance(field, KvField):
                return None
            slot = getattr(field, slot_name)
            if slot is not None:
                return slot
        return None

    def __repr__(self):
        """Show where reads and writes go."""
        return (
            f"<{type(self).__name__} {self.name!r}"
            f" {READER}={self.reader} {WRITER}={self.writer}>"
        )

    def with_slot(self, slot_name: str, slot: _Slot) -> "KvField":
        """Return a copy of the field with the given slot replaced."""
        if slot_name == READER:
            return type(self)(self.name, slot, self.writer)
        return type(self)(self.name, self.reader, slot)


# ------------------------------------------------------------------ TYPE LEVEL


def kv_reader(cls: type, method: str, *keys: str, **aliased_accessors: Hashable):
    """Define reader attributes on the class `cls`.

    For each of `keys` define the attribute of the same name which
    returns `<instance>.<method>[key]`. For each item of
    `aliased_accessors` define the attribute named by the item key
    which returns `<instance>.<method>[value]`, this allows the lookup
    key to be any hashable object, e.g. a tuple.

    Args:
        cls: Class to define attributes on.
        method: Name of the attribute (or zero-argument method) of the
            instance which provides the key-value container.
        keys: Keys used both as the attribute name and as the lookup
            key.
        aliased_accessors: Attribute name to lookup key mapping.
    Returns:
        The accessor table: attribute name to lookup key dict.
    Raises:
        KvAccessorConfigError: Some name is not a valid attribute name,
            nothing is defined in this case.

    """
    _check_names(method, keys, aliased_accessors)
    return _define(cls, method, keys, aliased_accessors, READER)


def kv_writer(cls: type, method: str, *keys: str, **aliased_accessors: Hashable):
    """Define writer attributes on the class `cls`.

    The same as `kv_reader`, but assigning the attribute stores the
    value with `<instance>.<method>[key] = value`.
    """
    _check_names(method, keys, aliased_accessors)
    return _define(cls, method, keys, aliased_accessors, WRITER)


def kv_accessor(cls: type, method: str, *keys: str, **aliased_accessors: Hashable):
    """Define both reader and writer attributes on the class `cls`.

    Returns the union of the `kv_reader` and `kv_writer` tables.
    """
    readers = kv_reader(cls, method, *keys, **aliased_accessors)
    writers = kv_writer(cls, method, *keys, **aliased_accessors)
    return {**readers, **writers}


# -------------------------------------------------------------- INSTANCE LEVEL


def kv_instance_reader(obj, method: str, *keys: str, **aliased_accessors: Hashable):
    """Define reader attributes on the single object `obj`.

    Descriptors work only when they live in a class, so `obj` is moved
    to its own subclass of the original class (once, on the first
    call) and the attributes are defined there. Other instances of the
    original class remain intact. Objects which do not allow
    `__class__` assignment (e.g. builtin types) raise `TypeError`.
    """
    _check_names(method, keys, aliased_accessors)
    return _define(_instance_class(obj), method, keys, aliased_accessors, READER)


def kv_instance_writer(obj, method: str, *keys: str, **aliased_accessors: Hashable):
    """Define writer attributes on the single object `obj`."""
    _check_names(method, keys, aliased_accessors)
    return _define(_instance_class(obj), method, keys, aliased_accessors, WRITER)


def kv_instance_accessor(obj, method: str, *keys: str, **aliased_accessors: Hashable):
    """Define both reader and writer attributes on the single object `obj`."""
    readers = kv_instance_reader(obj, method, *keys, **aliased_accessors)
    writers = kv_instance_writer(obj, method, *keys, **aliased_accessors)
    return {**readers, **writers}


# ----------------------------------------------------------------------- MIXIN


class KvAccessorMixin:
    """Make the generation functions available as methods of a class.

    Classmethods `kv_reader`, `kv_writer`, and `kv_accessor` define
    attributes for all the instances, methods `kv_instance_reader`,
    `kv_instance_writer`, and `kv_instance_accessor` define them for
    a single instance only.
    """

    # Accessor tables of all the classmethod calls merged together, so
    # it lists every name the class exposes from its containers. Each
    # classmethod call assigns a new merged dict to the class it is
    # called on, so subclasses start from the parent table but never
    # change it. The default is read-only.
    kv_accessor_table: Mapping[str, Any] = types.MappingProxyType({})

    @classmethod
    def kv_reader(cls, method: str, *keys: str, **aliased_accessors: Hashable):
        """Define reader attributes for all instances, see `kv_reader`."""
        return cls._kv_remember(kv_reader(cls, method, *keys, **aliased_accessors))

    @classmethod
    def kv_writer(cls, method: str, *keys: str, **aliased_accessors: Hashable):
        """Define writer attributes for all instances, see `kv_writer`."""
        return cls._kv_remember(kv_writer(cls, method, *keys, **aliased_accessors))

    @classmethod
    def kv_accessor(cls, method: str, *keys: str, **aliased_accessors: Hashable):
        """Define attributes for all instances, see `kv_accessor`."""
        return cls._kv_remember(kv_accessor(cls, method, *keys, **aliased_accessors))

    def kv_instance_reader(self, method: str, *keys: str, **aliased_accessors):
        """Define reader attributes for this instance only."""
        return kv_instance_reader(self, method, *keys, **aliased_accessors)

    def kv_instance_writer(self, method: str, *keys: str, **aliased_accessors):
        """Define writer attributes for this instance only."""
        return kv_instance_writer(self, method, *keys, **aliased_accessors)

    def kv_instance_accessor(self, method: str, *keys: str, **aliased_accessors):
        """Define reader and writer attributes for this instance only."""
        return kv_instance_accessor(self, method, *keys, **aliased_accessors)

    @classmethod
    def _kv_remember(cls, table):
        """Merge the `table` into the class own `kv_accessor_table`."""
        cls.kv_accessor_table = {**cls.kv_accessor_table, **table}
        return table


# ----------------------------------------------------------------------- UTILS


def kv_select(data: Mapping, table: Mapping) -> Dict[Any, Any]:
    """Pick items of `data` which keys are looked up by the `table`.

    The `table` is an accessor table returned by one of the generation
    functions (or several tables merged). Useful to trim the incoming
    data to the allow-list before storing it:
    ```
    ATTRIBUTES = kv_accessor(Employee, "info", "ssid", "dob")
    employee.info = kv_select(raw_info, ATTRIBUTES)
    ```
    """
    # Keys of `data` are hashable, so unhashable lookup keys never match.
    lookup_keys = {key for key in table.values() if isinstance(key, Hashable)}
    return {key: value for key, value in data.items() if key in lookup_keys}


def _define(host_cls, method, keys: Iterable, aliased_accessors, slot_name):
    """Build the accessor table and install the `slot_name` slots.

    Names must be checked with `_check_names` beforehand.
    """
    table = {key: key for key in keys}
    table.update(aliased_accessors)

    for name, key in table.items():
        field = _existing_field(host_cls, name) or KvField(name)
        setattr(host_cls, name, field.with_slot(slot_name, _Slot(method, key)))
        LOG.debug(
            "Defined %s %s.%s for %s[%r].",
            slot_name,
            host_cls.__qualname__,
            name,
            method,
            key,
        )
    return table


def _existing_field(host_cls, name) -> Optional[KvField]:
    """Find the field `name` is already routed by, if any.

    Looks through the MRO the same way the attribute lookup does. When
    the name is taken by something else it is going to be shadowed, so
    just log that.
    """
    for klass in host_cls.__mro__:
        if name in klass.__dict__:
            current = klass.__dict__[name]
            if isinstance(current, KvField):
                return current
            LOG.debug(
                "Replacing %s.%s defined in %s with a key-value accessor.",
                host_cls.__qualname__,
                name,
                klass.__qualname__,
            )
            return None
    return None


def _instance_class(obj):
    """Return the class private to `obj`, create it if necessary."""
    cls = type(obj)
    if cls.__dict__.get("_kv_instance_class", False):
        return cls
    private_cls = type(
        cls.__name__,
        (cls,),
        {
            # Keep the instance layout, otherwise `__class__` cannot be
            # assigned for classes with `__slots__`.
            "__slots__": (),
            "__module__": cls.__module__,
            "__qualname__": cls.__qualname__,
            "_kv_instance_class": True,
        },
    )
    obj.__class__ = private_cls
    LOG.debug(
        "Created the private class for %s instance %#x.", cls.__qualname__, id(obj)
    )
    return private_cls


def _delegate_target(instance, method):
    """Get the key-value container of the `instance`."""
    target = getattr(instance, method)
    if callable(target) and not hasattr(target, "__getitem__"):
        target = target()
    return target


def _check_names(method, keys: Iterable, aliased_accessors):
    """Ensure the delegate and all the attribute names are valid."""
    _check_name(method, "delegate")
    for name in keys:
        _check_name(name, "attribute")
    for name in aliased_accessors:
        _check_name(name, "attribute")


def _check_name(name, what):
    """Ensure `name` can be used as an attribute name."""
    if not isinstance(name, str):
        raise KvAccessorConfigError(
            name, f"{what} name must be a string, use an alias for non-string keys"
        )
    if not name.isidentifier():
        raise KvAccessorConfigError(name, f"{what} name is not a valid identifier")
    if keyword.iskeyword(name):
        raise KvAccessorConfigError(name, f"{what} name is a reserved keyword")

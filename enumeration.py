#!/usr/bin/env python3
#
# Copyright (c) 2014 Chris Russell
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.
"""Java-style enum types.

An enum type is a subclass of Enumeration providing two hooks:

    class ChatColor(Enumeration):
        @classmethod
        def _initialize_definitions(cls):
            # NAME: (red, green, blue)
            return {
                "RED": (255, 0, 0),
                "YELLOW": (255, 255, 0),
            }

        def _populate(self, definition):
            self._red, self._green, self._blue = definition

_initialize_definitions() is called once, the first time the type is used, and
returns every value the type defines. Insertion order gives each value its
ordinal. _populate() turns one attribute tuple into the instance's fields and
runs once per value, the first time that value is requested.

Values are singletons: ChatColor.RED, ChatColor.by_name("RED"),
ChatColor.by_ordinal(0), ChatColor["RED"] and a pickled copy of any of them are
all the same object, so values compare by identity."""

from functools import total_ordering
import threading

from definitions import DefinitionTable, EnumException
from registry import ValueRegistry

_registries = {}
_registries_lock = threading.RLock()

def _lookup_value(enum_class, name):
    return enum_class.by_name(name)

class EnumerationMeta(type):
    """Gives every enum type its own definition table and value registry."""

    def __getattr__(cls, attr):
        if attr.startswith("_"):
            raise AttributeError(attr)
        registry = cls._registry()
        if attr not in registry.table:
            raise AttributeError("{} has no enum value or attribute {}".format(cls.__name__, attr))
        return registry.get_by_name(attr)

    def __getitem__(cls, name):
        return cls._registry().get_by_name(name)

    def __iter__(cls):
        return cls._registry().all_values()

    def __len__(cls):
        return len(cls._registry().table)

    def __bool__(cls):
        return True

    def __contains__(cls, item):
        if isinstance(item, Enumeration):
            return type(item) is cls
        return item in cls._registry().table

    def _registry(cls):
        registry = _registries.get(cls)
        if registry is not None:
            return registry

        with _registries_lock:
            registry = _registries.get(cls)
            if registry is None:
                table = DefinitionTable.from_factory(cls._initialize_definitions)
                for name in table:
                    if cls._defines_attribute(name):
                        raise EnumException("enum name {} collides with an attribute of {}".format(name, cls.__name__))
                registry = ValueRegistry(table, cls._construct)
                _registries[cls] = registry
        return registry

    def _defines_attribute(cls, name):
        # Plain lookups would fall through to __getattr__ and recurse into _registry()
        for klass in cls.__mro__ + type(cls).__mro__:
            if name in vars(klass):
                return True
        return False

    def _construct(cls, name, ordinal, attributes):
        value = object.__new__(cls)
        object.__setattr__(value, "_name", name)
        object.__setattr__(value, "_ordinal", ordinal)
        value._populate(attributes)
        object.__setattr__(value, "_frozen", True)
        return value

@total_ordering
class Enumeration(metaclass=EnumerationMeta):
    """Base class of all enum types."""

    _name = None
    _ordinal = None
    _frozen = False

    def __new__(cls, *args, **kwargs):
        raise EnumException("{} values cannot be instantiated directly, use {}.by_name()".format(
            cls.__name__, cls.__name__))

    @classmethod
    def _initialize_definitions(cls):
        """Return the full definition set for this type.

        Either a mapping of name -> attribute tuple or an iterable of (name, attributes)
        pairs. Called once per type."""
        return {}

    def _populate(self, definition):
        """Derive this value's fields from its attribute tuple. Called once per value.

        May look up other values of the same type, never values of another enum type:
        each type builds its values under its own lock."""
        if definition:
            raise EnumException("{} defines attributes for {} but does not override _populate()".format(
                type(self).__name__, self._name))

    @classmethod
    def by_name(cls, name):
        return cls._registry().get_by_name(name)

    @classmethod
    def by_ordinal(cls, ordinal):
        return cls._registry().get_by_ordinal(ordinal)

    @classmethod
    def names(cls):
        return list(cls._registry().all_names())

    @classmethod
    def values(cls):
        return cls._registry().all_values()

    @property
    def name(self):
        return self._name

    @property
    def ordinal(self):
        return self._ordinal

    def __str__(self):
        return self._name

    def __repr__(self):
        return "<{}.{}: {}>".format(type(self).__name__, self._name, self._ordinal)

    def __setattr__(self, attr, value):
        if self._frozen:
            raise EnumException("cannot set {} on enum value {}.{}".format(attr, type(self).__name__, self._name))
        object.__setattr__(self, attr, value)

    def __delattr__(self, attr):
        if self._frozen:
            raise EnumException("cannot delete {} on enum value {}.{}".format(attr, type(self).__name__, self._name))
        object.__delattr__(self, attr)

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __reduce__(self):
        return (_lookup_value, (type(self), self._name))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


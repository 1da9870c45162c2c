#!/usr/bin/env python3
#
# Copyright (c) 2014 Chris Russell
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.
"""Definition tables for enum types and the errors raised when looking them up."""

from collections.abc import Mapping
from types import MappingProxyType

class EnumException(Exception):
    """ Thrown when an enum type is defined or used incorrectly """

class ValueNotFound(EnumException, LookupError):
    """ Thrown when no enum value exists under the requested key """

class UnknownName(ValueNotFound):
    """No enum value is defined under the requested name.

    bad_name: the name that was requested
    available_names: every valid name, in ordinal order"""

    def __init__(self, bad_name, available_names, message=""):
        self.bad_name = bad_name
        self.available_names = list(available_names)
        if not message:
            message = "No enum value available under that name ({}). Available names: {}".format(
                bad_name, ", ".join(self.available_names))
        super().__init__(message)

class OrdinalOutOfRange(ValueNotFound):
    """No enum value is defined at the requested ordinal.

    bad_ordinal: the ordinal that was requested
    max_ordinal: the largest valid ordinal (-1 when nothing is defined)"""

    def __init__(self, bad_ordinal, max_ordinal, message=""):
        self.bad_ordinal = bad_ordinal
        self.max_ordinal = max_ordinal
        if not message:
            message = "Given ordinal ({}) is out of range. The maximum ordinal value is {}.".format(
                bad_ordinal, max_ordinal)
        super().__init__(message)

def check_ordinal(ordinal):
    # bool is an int subclass but never a meaningful ordinal
    if isinstance(ordinal, bool) or not isinstance(ordinal, int):
        raise TypeError("enum ordinal must be an int, not {}".format(type(ordinal).__name__))

def check_name(name):
    if not isinstance(name, str):
        raise TypeError("enum name must be a str, not {}".format(type(name).__name__))

class DefinitionTable():
    """The frozen catalog of one enum type.

    names: enum names in ordinal order. The ordinal of a name is its position here.
    ordinals: name -> ordinal
    attributes: name -> attribute tuple, interpreted only by the enum type's populate step

    Accepts a mapping (insertion order gives the ordinals) or an iterable of
    (name, attributes) pairs."""

    def __init__(self, definitions):
        if isinstance(definitions, Mapping):
            definitions = definitions.items()

        names = []
        ordinals = {}
        attributes = {}
        for i, entry in enumerate(definitions):
            try:
                name, attrs = entry
            except (TypeError, ValueError):
                raise EnumException("enum definition is not a (name, attributes) pair: {!r}".format(entry)) from None
            if not isinstance(name, str):
                raise EnumException("enum name is not a string: {!r}".format(name))
            if not name:
                raise EnumException("enum name is empty")
            if name.startswith("_"):
                raise EnumException("enum name must not start with an underscore: {}".format(name))
            if name in ordinals:
                raise EnumException("enum name is not unique: {}".format(name))
            if isinstance(attrs, list):
                attrs = tuple(attrs)
            elif not isinstance(attrs, tuple):
                raise EnumException("enum attributes for {} are not a tuple: {!r}".format(name, attrs))
            names.append(name)
            ordinals[name] = i
            attributes[name] = attrs

        self._names = tuple(names)
        self._ordinals = MappingProxyType(ordinals)
        self._attributes = MappingProxyType(attributes)

    @classmethod
    def from_factory(cls, factory):
        """Build a table from the full definition set returned by a single call to factory()."""
        definitions = factory()
        if definitions is None:
            raise EnumException("enum definition factory {!r} returned None".format(factory))
        return cls(definitions)

    def __repr__(self):
        return "DefinitionTable({})".format(", ".join(
            "{}={!r}".format(name, self._attributes[name]) for name in self._names))

    def __len__(self):
        return len(self._names)

    def __iter__(self):
        return iter(self._names)

    def __contains__(self, name):
        return isinstance(name, str) and name in self._ordinals

    @property
    def max_ordinal(self):
        return len(self._names) - 1

    def names_in_order(self):
        return self._names

    def ordinal_of(self, name):
        check_name(name)
        try:
            return self._ordinals[name]
        except KeyError:
            raise UnknownName(name, self._names) from None

    def name_at(self, ordinal):
        check_ordinal(ordinal)
        # Negative ordinals are errors, not offsets from the end
        if ordinal < 0 or ordinal >= len(self._names):
            raise OrdinalOutOfRange(ordinal, self.max_ordinal)
        return self._names[ordinal]

    def attributes_of(self, name):
        check_name(name)
        try:
            return self._attributes[name]
        except KeyError:
            raise UnknownName(name, self._names) from None

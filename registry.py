#!/usr/bin/env python3
#
# Copyright (c) 2014 Chris Russell
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.
"""Lazily constructed, cached enum values."""

import logging
import threading

from definitions import EnumException, check_name

class ValueRegistry():
    """Hands out the single instance of each value defined in a DefinitionTable.

    Values are built on first request by calling constructor(name, ordinal, attributes)
    and served from the cache afterwards. A name is constructed at most once: the
    miss path runs under the registry's lock and re-checks the cache once inside it.

    table: the DefinitionTable the values are built from
    constructor: callable returning a fully populated value"""

    def __init__(self, table, constructor):
        self.table = table
        self._constructor = constructor
        self._values = {}
        self._constructing = set()
        # Re-entrant so a populate step can look up other values of the same type
        self._lock = threading.RLock()

    def __repr__(self):
        return "ValueRegistry(cached={}/{})".format(len(self._values), len(self.table))

    def __len__(self):
        return len(self.table)

    def is_cached(self, name):
        return name in self._values

    def cached_names(self):
        """Names that have been constructed so far, in construction order."""
        return list(self._values)

    def get_by_name(self, name):
        check_name(name)
        if name in self._values:
            return self._values[name]

        with self._lock:
            if name in self._values:
                return self._values[name]

            ordinal = self.table.ordinal_of(name)
            attributes = self.table.attributes_of(name)

            if name in self._constructing:
                raise EnumException("recursive construction of enum value {}".format(name))
            self._constructing.add(name)
            try:
                value = self._constructor(name, ordinal, attributes)
            finally:
                self._constructing.discard(name)

            self._values[name] = value
            logging.debug("Constructed %s (ordinal %d)", name, ordinal)
            return value

    def get_by_ordinal(self, ordinal):
        return self.get_by_name(self.table.name_at(ordinal))

    def all_names(self):
        return self.table.names_in_order()

    def all_values(self):
        for name in self.table.names_in_order():
            yield self.get_by_name(name)

#!/usr/bin/env python3
#
# Copyright (c) 2014 Chris Russell
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.
"""Test enumeration.py"""
import copy
import pickle
import unittest

from definitions import EnumException, OrdinalOutOfRange, UnknownName
from enumeration import Enumeration

class Planet(Enumeration):
    @classmethod
    def _initialize_definitions(cls):
        # NAME: (mass in kg, radius in m)
        return [
            ("MERCURY", (3.303e+23, 2.4397e6)),
            ("VENUS", (4.869e+24, 6.0518e6)),
            ("EARTH", (5.976e+24, 6.37814e6)),
        ]

    def _populate(self, definition):
        self._mass, self._radius = definition

    @property
    def mass(self):
        return self._mass

    def surface_gravity(self):
        return 6.67300E-11 * self._mass / (self._radius * self._radius)

class Suit(Enumeration):
    @classmethod
    def _initialize_definitions(cls):
        return {"CLUBS": (), "DIAMONDS": (), "HEARTS": (), "SPADES": ()}

def make_counting_enum():
    populated = []

    class Counted(Enumeration):
        @classmethod
        def _initialize_definitions(cls):
            return {"RED": (255, 0, 0), "GREEN": (0, 255, 0), "BLUE": (0, 0, 255)}

        def _populate(self, definition):
            populated.append(self.name)
            self.rgb = definition

    return Counted, populated

class EnumerationTestCase(unittest.TestCase):
    def test_lookup(self):
        counted, _ = make_counting_enum()
        self.assertEqual(counted.by_name("GREEN").ordinal, 1)
        self.assertEqual(counted.by_ordinal(2).name, "BLUE")
        self.assertEqual(counted.names(), ["RED", "GREEN", "BLUE"])
        self.assertIs(counted.by_name("RED"), counted.by_name("RED"))
        self.assertIs(counted.RED, counted.by_name("RED"))
        self.assertIs(counted["RED"], counted.by_ordinal(0))

    def test_population(self):
        counted, populated = make_counting_enum()
        self.assertEqual(counted.BLUE.rgb, (0, 0, 255))
        self.assertEqual(populated, ["BLUE"])

        for _ in range(3):
            counted.BLUE
            counted.by_ordinal(2)
            list(counted.values())
        self.assertEqual(sorted(populated), ["BLUE", "GREEN", "RED"])

    def test_values(self):
        values = list(Planet.values())
        self.assertEqual([p.name for p in values], ["MERCURY", "VENUS", "EARTH"])
        self.assertEqual([p.ordinal for p in values], [0, 1, 2])
        self.assertEqual(list(Planet), values)
        self.assertEqual(len(Planet), 3)

    def test_behavior(self):
        self.assertAlmostEqual(Planet.EARTH.surface_gravity(), 9.80, places=2)
        self.assertEqual(Planet.VENUS.mass, 4.869e+24)

    def test_contains(self):
        self.assertIn("EARTH", Planet)
        self.assertIn(Planet.EARTH, Planet)
        self.assertNotIn("PLUTO", Planet)
        self.assertNotIn(Suit.CLUBS, Planet)

    def test_str_and_repr(self):
        self.assertEqual(str(Suit.HEARTS), "HEARTS")
        self.assertEqual(repr(Suit.HEARTS), "<Suit.HEARTS: 2>")

    def test_unknown_name(self):
        with self.assertRaises(UnknownName) as cm:
            Planet.by_name("PLUTO")
        self.assertEqual(cm.exception.bad_name, "PLUTO")
        self.assertEqual(cm.exception.available_names, Planet.names())
        with self.assertRaises(UnknownName):
            Planet["PLUTO"]
        with self.assertRaises(AttributeError):
            Planet.PLUTO
        self.assertFalse(hasattr(Planet, "PLUTO"))

    def test_ordinal_out_of_range(self):
        for bad in (-1, 3):
            with self.assertRaises(OrdinalOutOfRange) as cm:
                Planet.by_ordinal(bad)
            self.assertEqual(cm.exception.max_ordinal, 2)

    def test_immutable(self):
        with self.assertRaises(EnumException):
            Planet.EARTH._mass = 0
        with self.assertRaises(EnumException):
            Planet.EARTH.extra = 1
        with self.assertRaises(EnumException):
            del Planet.EARTH._mass
        with self.assertRaises(EnumException):
            Planet.EARTH.name = "MARS"
        self.assertEqual(Planet.EARTH.name, "EARTH")

    def test_no_direct_instantiation(self):
        with self.assertRaises(EnumException):
            Planet()
        with self.assertRaises(EnumException):
            Suit("CLUBS")

    def test_ordering(self):
        self.assertLess(Suit.CLUBS, Suit.SPADES)
        self.assertGreaterEqual(Suit.HEARTS, Suit.DIAMONDS)
        self.assertEqual(sorted([Suit.SPADES, Suit.CLUBS, Suit.HEARTS]),
                         [Suit.CLUBS, Suit.HEARTS, Suit.SPADES])
        with self.assertRaises(TypeError):
            Suit.CLUBS < Planet.EARTH

    def test_equality_is_identity(self):
        self.assertEqual(Suit.CLUBS, Suit.by_name("CLUBS"))
        self.assertNotEqual(Suit.CLUBS, "CLUBS")
        self.assertNotEqual(Suit.CLUBS, Suit.SPADES)
        self.assertEqual(len({Suit.CLUBS, Suit.by_ordinal(0), Suit["CLUBS"]}), 1)

    def test_serialization_identity(self):
        for protocol in range(pickle.HIGHEST_PROTOCOL + 1):
            self.assertIs(pickle.loads(pickle.dumps(Planet.VENUS, protocol)), Planet.VENUS)
        self.assertIs(copy.copy(Planet.VENUS), Planet.VENUS)
        self.assertIs(copy.deepcopy([Planet.VENUS])[0], Planet.VENUS)

    def test_subclass_has_own_values(self):
        class Rank(Suit):
            pass

        self.assertIsNot(Rank.CLUBS, Suit.CLUBS)
        self.assertIsInstance(Rank.CLUBS, Rank)
        self.assertIs(Rank.CLUBS, Rank.by_name("CLUBS"))
        self.assertIn(Rank.CLUBS, Rank)
        self.assertNotIn(Rank.CLUBS, Suit)
        self.assertNotIn(Suit.CLUBS, Rank)
        self.assertIn("CLUBS", Rank)

    def test_empty(self):
        class Nothing(Enumeration):
            pass

        self.assertEqual(Nothing.names(), [])
        self.assertEqual(list(Nothing.values()), [])
        self.assertEqual(len(Nothing), 0)
        self.assertTrue(Nothing)
        with self.assertRaises(OrdinalOutOfRange) as cm:
            Nothing.by_ordinal(0)
        self.assertEqual(cm.exception.max_ordinal, -1)

    def test_name_collision(self):
        class Clashing(Enumeration):
            @classmethod
            def _initialize_definitions(cls):
                return {"values": ()}

        with self.assertRaisesRegex(EnumException, "collides"):
            Clashing.names()

    def test_missing_populate(self):
        class Unpopulated(Enumeration):
            @classmethod
            def _initialize_definitions(cls):
                return {"ONE": (1,)}

        with self.assertRaisesRegex(EnumException, "_populate"):
            Unpopulated.ONE

    def test_definitions_initialized_once(self):
        calls = []

        class Lazy(Enumeration):
            @classmethod
            def _initialize_definitions(cls):
                calls.append(1)
                return {"A": (), "B": ()}

        self.assertEqual(calls, [])
        Lazy.A
        Lazy.by_ordinal(1)
        Lazy.names()
        self.assertEqual(calls, [1])

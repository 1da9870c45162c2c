#!/usr/bin/env python3
#
# Copyright (c) 2014 Chris Russell
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.
"""Example enum type: a fixed palette of colors."""

import json
import pickle

from definitions import ValueNotFound
from enumeration import Enumeration

class Color(Enumeration):
    """A color in the palette.

    red: red channel value (0-255)
    green: green channel value (0-255)
    blue: blue channel value (0-255)"""

    @classmethod
    def _initialize_definitions(cls):
        # NAME: (red, green, blue)
        return {
            "RED": (255, 0, 0),
            "GREEN": (0, 255, 0),
            "BLUE": (0, 0, 255),
            "YELLOW": (255, 255, 0),
            "WHITE": (255, 255, 255),
            "BLACK": (0, 0, 0),
        }

    def _populate(self, definition):
        self._red, self._green, self._blue = definition

    @property
    def red(self):
        return self._red

    @property
    def green(self):
        return self._green

    @property
    def blue(self):
        return self._blue

    def to_html_code(self):
        return "#{:02x}{:02x}{:02x}".format(self._red, self._green, self._blue)

    @classmethod
    def find_by_html_code(cls, code):
        """Return the color whose HTML code is code, e.g. "#ffff00" or "FFFF00"."""
        wanted = "#" + code.lower().lstrip("#")
        for color in cls.values():
            if color.to_html_code() == wanted:
                return color
        raise ValueNotFound("No color has the html code {}".format(code))

def say_something_nice(color):
    if color is Color.RED:
        something_nice = " is like the love of a rose petal."
    elif color is Color.BLUE:
        something_nice = " is like a deep sea on a sunny day."
    else:
        something_nice = " is a wonderful color."
    return "The color " + color.name + something_nice

def list_html_codes():
    return ["{}({}): {}".format(color.name, color.ordinal, color.to_html_code()) for color in Color.values()]

def compare_colors(color1, color2):
    if color1 is color2:
        comparison_result = " is "
    else:
        comparison_result = " is not "
    return color1.name + comparison_result + str(color2)

def serialized_copy_report(color):
    """Round trip color through pickle and report whether the canonical value came back."""
    copy = pickle.loads(pickle.dumps(color))
    if copy is color:
        return "{}: serialized copy is the same value".format(color)
    return "{}: serialized copy is a different object".format(color)

def colors_to_json():
    return json.dumps([{
        "name": color.name,
        "ordinal": color.ordinal,
        "rgb": [color.red, color.green, color.blue],
        "html": color.to_html_code(),
    } for color in Color.values()], indent=4)

def dump_colors():
    for line in list_html_codes():
        print(line)

#!/usr/bin/env python3
#
# Copyright (c) 2014 Chris Russell
# Distributed under the MIT software license, see the accompanying
# file COPYING or http://www.opensource.org/licenses/mit-license.php.
"""Code for demonstrating the Color enum type from the command line."""

import logging
import optparse
import sys

from color import (
    Color,
    colors_to_json,
    compare_colors,
    dump_colors,
    say_something_nice,
    serialized_copy_report,
)
from definitions import ValueNotFound

def main():
    parser = optparse.OptionParser(usage="%prog [options]")
    parser.add_option("--list", action="store_true", default=False,
                      help="Print every color with its ordinal and html code")
    parser.add_option("--nice", dest="nice", default=None,
                      help="Say something nice about the named color")
    parser.add_option("--compare", dest="compare", default=None,
                      help="Compare two colors given as NAME1,NAME2")
    parser.add_option("--html", dest="html", default=None,
                      help="Find the color with the given html code")
    parser.add_option("--ordinal", dest="ordinal", type="int", default=None,
                      help="Print the color at the given ordinal")
    parser.add_option("--roundtrip", dest="roundtrip", default=None,
                      help="Serialize and deserialize the named color and compare it with the original")
    parser.add_option("--json", action="store_true", default=False,
                      help="Print every color as JSON")
    parser.add_option("-v", "--verbose", action="store_true", default=False,
                      help="Log enum value construction")
    (options, args) = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if options.verbose else logging.WARNING,
                        format="%(levelname)s: %(message)s")

    try:
        if options.list:
            dump_colors()

        if options.nice:
            print(say_something_nice(Color.by_name(options.nice)))

        if options.compare:
            names = options.compare.split(",")
            if len(names) != 2:
                parser.error("--compare takes exactly two names separated by a comma")
            print(compare_colors(Color.by_name(names[0]), Color.by_name(names[1])))

        if options.html:
            print(Color.find_by_html_code(options.html))

        if options.ordinal is not None:
            print(Color.by_ordinal(options.ordinal))

        if options.roundtrip:
            print(serialized_copy_report(Color.by_name(options.roundtrip)))

        if options.json:
            print(colors_to_json())
    except ValueNotFound as e:
        logging.error(e)
        sys.exit(1)

if __name__ == '__main__':
    main()

#  Copyright  2021 Alexis Lopez Zubieta
#
#  Permission is hereby granted, free of charge, to any person obtaining a
#  copy of this software and associated documentation files (the "Software"),
#  to deal in the Software without restriction, including without limitation the
#  rights to use, copy, modify, merge, publish, distribute, sublicense, and/or
#  sell copies of the Software, and to permit persons to whom the Software is
#  furnished to do so, subject to the following conditions:
#
#  The above copyright notice and this permission notice shall be included in
#  all copies or substantial portions of the Software.
import argparse


def setup_argparser():
    parser = argparse.ArgumentParser(
        description="Static shared library dependency resolver"
    )

    parser.add_argument(
        "file",
        help="ELF binary to analyze",
    )
    parser.add_argument(
        "--log",
        dest="loglevel",
        default="INFO",
        help="logging level (default: INFO)",
    )
    parser.add_argument(
        "--search-dir",
        dest="search_dirs",
        action="append",
        default=None,
        metavar="DIR",
        help="library search directory, may be repeated; replaces the default "
        "list (default: multiarch, lib64, lib32 and lib dirs)",
    )
    parser.add_argument(
        "--tree",
        dest="tree",
        action="store_true",
        help="print every transitive dependency instead of the direct ones",
    )

    return parser

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
import logging
import sys

from lddr.cli.argparse import setup_argparser
from lddr.cli.printer import format_direct_dependencies, format_tree
from lddr.errors import AnalyzeError
from lddr.modules.analyze import DependencyAnalyzer


def __main__(argv=None):
    parser = setup_argparser()
    args = parser.parse_args(argv)

    numeric_level = getattr(logging, args.loglevel.upper(), None)
    if not isinstance(numeric_level, int):
        parser.error("Invalid log level: %s" % args.loglevel)
    logging.basicConfig(level=numeric_level)

    try:
        tree = DependencyAnalyzer(args.search_dirs).analyze(args.file)
    except AnalyzeError as err:
        logging.error(err)
        return 1

    if args.tree:
        lines = format_tree(tree)
    else:
        lines = format_direct_dependencies(tree)

    for line in lines:
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(__main__())

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
"""
Resolve declared library names to files on disk.

Only the given search directories are consulted. LD_LIBRARY_PATH, ld.so.conf
and the DT_RPATH/DT_RUNPATH entries embedded in the binaries are ignored on
purpose, so results only depend on the directory list and the file system.
"""
import logging
import os

DEFAULT_SEARCH_DIRS = [
    # multiarch
    "/lib/x86_64-linux-gnu",
    "/usr/lib/x86_64-linux-gnu",
    # 64 bits
    "/lib64",
    "/usr/lib64",
    # 32 bits
    "/lib32",
    "/usr/lib32",
    "/lib",
    "/usr/lib",
]


def locate(name, search_dirs):
    # only bare file names can be looked up inside the search directories
    if os.sep in name or (os.altsep and os.altsep in name):
        return None

    for search_dir in search_dirs:
        path = os.path.join(search_dir, name)
        if os.path.isfile(path):
            return path

    return None


class LibraryLocator:
    def __init__(self, search_dirs=None):
        if search_dirs is None:
            search_dirs = DEFAULT_SEARCH_DIRS

        self.search_dirs = list(search_dirs)
        self.logger = logging.getLogger("LibraryLocator")

    def locate(self, name):
        path = locate(name, self.search_dirs)
        if path:
            self.logger.debug("%s found at %s" % (name, path))
        else:
            self.logger.debug("%s not found in %s" % (name, ":".join(self.search_dirs)))

        return path

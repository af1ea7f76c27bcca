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
import os

from lddr.errors import ParseError
from lddr.modules.analyze.binary_file import BinaryFile
from lddr.modules.analyze.dependency_tree import DependencyTree
from lddr.modules.analyze.library_locator import LibraryLocator
from lddr.utils import elf


class DependencyAnalyzer:
    """
    Build the tree of shared libraries an ELF binary would load.

    Every declared library is resolved against the search directories and, if
    found, its own declared libraries are followed depth-first. Libraries
    reached through several branches are resolved once per branch.

    A library that can not be found is recorded with no real path and is not
    followed. A library that is found but can not be read or parsed aborts the
    analysis.
    """

    def __init__(self, search_dirs=None, extractor=elf.extract):
        self.locator = LibraryLocator(search_dirs)
        self.extractor = extractor
        self.logger = logging.getLogger("DependencyAnalyzer")

    def analyze(self, path) -> DependencyTree:
        path = os.fspath(path)
        metadata = self._extract(path)

        tree = DependencyTree()
        root = BinaryFile(
            name=path,
            interpreter=metadata.interpreter,
            is_root=True,
            is_executable=metadata.is_executable,
        )
        root_id = tree.insert_root(root)
        self.logger.info("Analyzing %s" % path)

        interpreter_name = None
        if metadata.interpreter:
            interpreter_name = os.path.basename(metadata.interpreter)

        # each frame holds the node being expanded, the declared libraries left
        # to visit and the real paths of the node ancestors (itself included)
        stack = [
            (root_id, iter(metadata.declared_libraries), frozenset([os.path.realpath(path)]))
        ]
        while stack:
            parent_id, pending, ancestors = stack[-1]
            name = next(pending, None)
            if name is None:
                stack.pop()
                continue

            real_path = self.locator.locate(name)
            if real_path is None:
                self.logger.warning("%s not found" % name)
                tree.insert_child(parent_id, BinaryFile(name))
                continue

            child_metadata = self._extract(real_path)
            child_id = tree.insert_child(
                parent_id,
                BinaryFile(
                    name,
                    real_path=real_path,
                    is_executable=child_metadata.is_executable,
                ),
            )

            # the loader lists itself as a dependency of the libraries it serves.
            # It is still parsed above, so a corrupt loader aborts the analysis.
            if name == interpreter_name:
                self.logger.debug("Not following interpreter %s" % real_path)
                continue

            canonical_path = os.path.realpath(real_path)
            if canonical_path in ancestors:
                self.logger.warning(
                    "Dependency cycle on %s, not following it again" % real_path
                )
                continue

            stack.append(
                (
                    child_id,
                    iter(child_metadata.declared_libraries),
                    ancestors.union([canonical_path]),
                )
            )

        return tree

    def _extract(self, path):
        data = elf.read(path)
        try:
            return self.extractor(data)
        except ParseError as err:
            raise ParseError(err.reason, path) from err


def analyze(path, search_dirs=None) -> DependencyTree:
    return DependencyAnalyzer(search_dirs).analyze(path)

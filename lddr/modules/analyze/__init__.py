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
from lddr.modules.analyze.binary_file import BinaryFile
from lddr.modules.analyze.dependency_analyzer import DependencyAnalyzer, analyze
from lddr.modules.analyze.dependency_tree import DependencyTree
from lddr.modules.analyze.library_locator import DEFAULT_SEARCH_DIRS, LibraryLocator

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


class AnalyzeError(Exception):
    """Base class for failures that abort a dependency analysis"""


class ReadError(AnalyzeError):
    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        super().__init__("Unable to read %s: %s" % (path, reason))


class ParseError(AnalyzeError):
    def __init__(self, reason, path=None):
        self.path = path
        self.reason = reason
        if path:
            super().__init__("Unable to parse %s: %s" % (path, reason))
        else:
            super().__init__("Unable to parse binary: %s" % reason)


class NodeNotFoundError(KeyError):
    pass

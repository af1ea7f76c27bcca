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
from typing import Optional


class BinaryFile:
    """A binary reached while following the dependencies of an executable"""

    def __init__(
        self,
        name: str,
        real_path: Optional[str] = None,
        interpreter: Optional[str] = None,
        is_root: bool = False,
        is_executable: bool = False,
    ):
        self.name = name
        self.real_path = real_path
        self.interpreter = interpreter
        self.is_root = is_root
        self.is_executable = is_executable

    @property
    def path(self):
        if self.is_root:
            return self.name
        return self.real_path

    @property
    def is_resolved(self):
        return self.is_root or self.real_path is not None

    def __eq__(self, other):
        if not isinstance(other, BinaryFile):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        return "BinaryFile(name=%r, real_path=%r, interpreter=%r, is_root=%r, is_executable=%r)" % (
            self.name,
            self.real_path,
            self.interpreter,
            self.is_root,
            self.is_executable,
        )

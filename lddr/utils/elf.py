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
import io
from collections import namedtuple

from elftools.common.exceptions import ELFError
from elftools.elf.constants import P_FLAGS
from elftools.elf.elffile import ELFFile

from lddr.errors import ParseError, ReadError

ELF_MAGIC = b"\x7fELF"

ElfMetadata = namedtuple(
    "ElfMetadata", ["is64", "is_executable", "interpreter", "declared_libraries"]
)


def has_magic_bytes(path) -> bool:
    try:
        with open(path, "rb") as f:
            return f.read(len(ELF_MAGIC)) == ELF_MAGIC
    except OSError:
        return False


def read(path) -> bytes:
    """Read the whole file at path, raising ReadError if that is not possible"""
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as err:
        raise ReadError(path, err.strerror or err) from err


def extract(data: bytes) -> ElfMetadata:
    """
    Extract the metadata needed to follow the dynamic linking of an ELF binary.

    The declared libraries are the DT_NEEDED entries of the PT_DYNAMIC segment,
    in the order in which they appear on disk. Segments are used instead of
    sections so stripped (section-less) binaries are still understood.

    :param data: raw contents of the binary
    :raise ParseError: if data is not a well formed ELF file
    """
    try:
        elf_file = ELFFile(io.BytesIO(data))

        is_executable = False
        interpreter = None
        declared_libraries = []
        for segment in elf_file.iter_segments():
            if segment["p_flags"] & P_FLAGS.PF_X:
                is_executable = True

            if segment.header.p_type == "PT_INTERP":
                interpreter = segment.get_interp_name()

            if segment.header.p_type == "PT_DYNAMIC":
                _, strtab_offset = segment.get_table_offset("DT_STRTAB")
                if strtab_offset is None:
                    raise ParseError("dynamic segment has no string table")

                for tag in segment.iter_tags():
                    if tag.entry.d_tag == "DT_NEEDED":
                        declared_libraries.append(tag.needed)

        return ElfMetadata(
            is64=elf_file.elfclass == 64,
            is_executable=is_executable,
            interpreter=interpreter,
            declared_libraries=declared_libraries,
        )
    except ELFError as err:
        raise ParseError(str(err)) from err
    except UnicodeDecodeError as err:
        raise ParseError("invalid string: %s" % err) from err

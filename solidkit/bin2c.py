"""Turn a binary file into a C header holding a byte array."""

from __future__ import annotations

import sys
from pathlib import Path

ITEMS_PER_LINE = 10
HEADER_SUFFIX = ".h"

USAGE = (
    "Usage: bin2c <BINARY file name> <TARGET file name> <STRUCT name>\n",
    " <STRUCT > = name of the C structure in the destination file name",
    " <TARGET > = without extension '.h' it will be added by program",
)


class Bin2CError(OSError):
    """Raised when the source cannot be read or the target cannot be written."""


def define_name(struct_name):
    """Return the name of the length #define for an array name."""
    return struct_name.upper() + "_LEN"


def to_c_header(data, struct_name):
    """Render bytes as a C header with a length #define and an array."""
    data = bytes(data)
    parts = [
        f"#define {define_name(struct_name)} {len(data)}\n\n",
        f" static unsigned char {struct_name}[]={{\n  ",
    ]
    last = len(data) - 1
    for start in range(0, len(data), ITEMS_PER_LINE):
        chunk = data[start : start + ITEMS_PER_LINE]
        for offset, byte in enumerate(chunk):
            parts.append(f"0x{byte:02X}")
            if start + offset != last:
                parts.append(",")
        parts.append("\n  ")
    parts.append("};\n")
    return "".join(parts)


def convert_file(source, target, struct_name):
    """Write the header for source to target plus '.h'; return the path written."""
    source = Path(source)
    destination = Path(str(target) + HEADER_SUFFIX)
    try:
        data = source.read_bytes()
    except OSError as exc:
        raise Bin2CError(f"ERROR: I can't find source file  {source}") from exc
    try:
        destination.write_text(to_c_header(data, struct_name))
    except OSError as exc:
        raise Bin2CError(f"ERROR: I can't open destination file  {destination}") from exc
    return destination


def main(argv=None):
    """Command entry point; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 3:
        for line in USAGE:
            print(line)
        return 0
    try:
        convert_file(args[0], args[1], args[2])
    except Bin2CError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0
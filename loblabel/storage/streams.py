"""Byte streams for input and output files, gzip-compressed by suffix."""

import pyarrow as pa

GZIP_SUFFIX = ".gz"

# Read/write buffer size in bytes
BUFFER_SIZE = 1 << 20


def compression_for(path: str) -> str | None:
    """Return the pyarrow codec name implied by a filename, or None for plain files."""
    return "gzip" if path.endswith(GZIP_SUFFIX) else None


def open_input_stream(path: str) -> pa.NativeFile:
    """Open a file for reading, decompressing gzip when the name ends in .gz.

    Raises:
        OSError: If the file cannot be opened.
    """
    return pa.input_stream(
        path, compression=compression_for(path), buffer_size=BUFFER_SIZE
    )


def open_output_stream(path: str) -> pa.NativeFile:
    """Create (or truncate) a file for writing, gzip-compressing when the name ends in .gz.

    Raises:
        OSError: If the file cannot be created.
    """
    return pa.output_stream(
        path, compression=compression_for(path), buffer_size=BUFFER_SIZE
    )

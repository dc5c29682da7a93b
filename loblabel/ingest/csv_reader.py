"""Streaming CSV reader for top-of-book snapshots."""

from collections.abc import Iterator

import pyarrow as pa
import pyarrow.csv as pacsv

from loblabel.ingest.snapshot import SNAPSHOT_COLUMNS, Snapshot
from loblabel.storage.streams import BUFFER_SIZE, open_input_stream

# pyarrow errors raised for content that does not match the snapshot schema
_DECODE_ERRORS = (pa.ArrowInvalid, pa.ArrowKeyError, pa.ArrowTypeError)

# pyarrow message for a stream with no bytes at all
EMPTY_CSV_MESSAGE = "Empty CSV file"


class SnapshotDecodeError(ValueError):
    """Raised when an input row cannot be decoded into a Snapshot."""


class SnapshotReader:
    """Iterates snapshots from a CSV stream one record batch at a time.

    Only the snapshot columns are decoded, all as float64; extra columns are
    ignored. Empty or unparsable values are decode errors, never nulls.
    """

    def __init__(self, source: str | pa.NativeFile, block_size: int = BUFFER_SIZE):
        """Initialize the reader.

        Args:
            source: Input path (gzip-compressed if it ends in .gz), or an
                already open pyarrow input stream.
            block_size: Bytes decoded per record batch.
        """
        self._source = source
        self._read_options = pacsv.ReadOptions(block_size=block_size)
        self._convert_options = pacsv.ConvertOptions(
            column_types={name: pa.float64() for name in SNAPSHOT_COLUMNS},
            include_columns=SNAPSHOT_COLUMNS,
            null_values=[],
            strings_can_be_null=False,
        )

    def __iter__(self) -> Iterator[Snapshot]:
        if isinstance(self._source, str):
            with open_input_stream(self._source) as stream:
                yield from self._iter_stream(stream)
        else:
            yield from self._iter_stream(self._source)

    def _iter_stream(self, stream: pa.NativeFile) -> Iterator[Snapshot]:
        try:
            reader = pacsv.open_csv(
                stream,
                read_options=self._read_options,
                convert_options=self._convert_options,
            )
        except pa.ArrowInvalid as e:
            # A zero-byte stream has no header and no rows
            if EMPTY_CSV_MESSAGE in str(e):
                return
            raise SnapshotDecodeError(f"deserialize Snapshot: {e}") from e
        except _DECODE_ERRORS as e:
            raise SnapshotDecodeError(f"deserialize Snapshot: {e}") from e

        batches = iter(reader)
        while True:
            try:
                batch = next(batches)
            except StopIteration:
                return
            except _DECODE_ERRORS as e:
                raise SnapshotDecodeError(f"deserialize Snapshot: {e}") from e

            columns = [batch.column(name).to_pylist() for name in SNAPSHOT_COLUMNS]
            for values in zip(*columns):
                yield Snapshot.from_values(values)

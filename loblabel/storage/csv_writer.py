"""Batched CSV writer for labeled samples."""

import pyarrow as pa
import pyarrow.csv as pacsv

from loblabel.features.labeler import LabeledSample
from loblabel.storage.schemas import LABELED_ARROW_SCHEMA, sample_to_row
from loblabel.storage.streams import open_output_stream


class LabeledCsvWriter:
    """Buffers labeled samples and writes them as CSV record batches.

    The header is written when the writer is created, so an empty run still
    produces a file with the header line. Gzip compression is selected by a
    `.gz` output suffix.
    """

    def __init__(self, sink: str | pa.NativeFile, batch_size: int = 10_000):
        """Initialize the writer.

        Args:
            sink: Output path, or an already open pyarrow output stream.
            batch_size: Number of samples buffered before a batch is written.

        Raises:
            OSError: If the output file cannot be created.
        """
        if isinstance(sink, str):
            self._stream = open_output_stream(sink)
            self._owns_stream = True
        else:
            self._stream = sink
            self._owns_stream = False
        self._batch_size = batch_size
        self._buffer: list[dict] = []
        self._writer = pacsv.CSVWriter(
            self._stream,
            LABELED_ARROW_SCHEMA,
            write_options=pacsv.WriteOptions(include_header=True, quoting_style="none"),
        )
        self._closed = False

    def write(self, sample: LabeledSample) -> None:
        """Buffer a labeled sample for writing."""
        self._buffer.append(sample_to_row(sample))
        if len(self._buffer) >= self._batch_size:
            self.flush()

    def flush(self) -> None:
        """Write all buffered samples."""
        if not self._buffer:
            return
        batch = pa.RecordBatch.from_pylist(self._buffer, schema=LABELED_ARROW_SCHEMA)
        self._writer.write_batch(batch)
        self._buffer = []

    def close(self) -> None:
        """Flush remaining samples and close the output."""
        if self._closed:
            return
        self.flush()
        self._writer.close()
        if self._owns_stream:
            self._stream.close()
        self._closed = True

    def __enter__(self) -> "LabeledCsvWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            # Do not persist a partial batch from a failed run
            self._buffer = []
        self.close()

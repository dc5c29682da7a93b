"""Storage package: byte streams, CSV output and Iceberg output."""

from loblabel.storage.csv_writer import LabeledCsvWriter
from loblabel.storage.iceberg_sink import (
    LabeledTableWriter,
    create_labeled_table,
    get_catalog,
)
from loblabel.storage.schemas import (
    LABELED_ARROW_SCHEMA,
    LABELED_FEATURES_SCHEMA,
    OUTPUT_COLUMNS,
)
from loblabel.storage.streams import open_input_stream, open_output_stream

__all__ = [
    "get_catalog",
    "create_labeled_table",
    "LabeledCsvWriter",
    "LabeledTableWriter",
    "LABELED_ARROW_SCHEMA",
    "LABELED_FEATURES_SCHEMA",
    "OUTPUT_COLUMNS",
    "open_input_stream",
    "open_output_stream",
]

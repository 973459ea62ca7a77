"""
Reference tables as CSV.

Recorder keeps rows in memory and writes them in batches of `buffer_limit`;
write_reference_table() drives it from a Thermocouple's reference_table().

    with Recorder("k.csv", TABLE_HEADER) as rec:
        rec.append(["100", "4.096"])
"""
from __future__ import annotations
import csv
from pathlib import Path
from typing import List

from thermocalc.constants import BUFFER_LIMIT, TABLE_HEADER
from thermocalc.logger_setup import app_logger
from thermocalc.thermocouple import Thermocouple


class Recorder:
    def __init__(
        self, file_path: str | Path, header: List[str], buffer_limit: int = BUFFER_LIMIT
    ) -> None:
        self.file_path = Path(file_path)
        self.buffer_limit = buffer_limit
        self.buffer: List[List] = []
        self.rows_written = 0

        # open file & write header immediately
        self._file = self.file_path.open("w", newline="")
        self._writer = csv.writer(self._file)
        self._writer.writerow(header)

    def __enter__(self) -> "Recorder":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # public API
    # ------------------------------------------------------------------ #
    def append(self, row: List) -> None:
        """Add one row; flush when the buffer limit is reached."""
        self.buffer.append(row)
        if len(self.buffer) >= self.buffer_limit:
            self._flush()

    def close(self) -> None:
        """Flush remaining rows and close the file handle."""
        if self._file.closed:
            return
        try:
            if self.buffer:
                self._flush()
        finally:
            self._file.close()

    # ------------------------------------------------------------------ #
    # internals
    # ------------------------------------------------------------------ #
    def _flush(self) -> None:
        self._writer.writerows(self.buffer)
        self._file.flush()
        self.rows_written += len(self.buffer)
        app_logger.debug(f"Written {len(self.buffer)} rows to {self.file_path.name}")
        self.buffer.clear()


def write_reference_table(
    file_path: str | Path,
    thermocouple: Thermocouple,
    start: float | None = None,
    stop: float | None = None,
    step: float | None = None,
) -> int:
    """Write a temperature/EMF table to CSV; returns the number of rows."""
    kwargs = {} if step is None else {"step": step}
    temperatures, emfs = thermocouple.reference_table(start, stop, **kwargs)
    with Recorder(file_path, TABLE_HEADER) as rec:
        for temperature, emf in zip(temperatures, emfs):
            rec.append([f"{temperature:g}", f"{emf:.3f}"])
    app_logger.info(
        f"Type {thermocouple.type.label} reference table: "
        f"{rec.rows_written} rows written to {rec.file_path}"
    )
    return rec.rows_written

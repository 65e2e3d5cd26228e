"""Write location rows to CSV."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable, Sequence

from ..core import LOCATION_COLUMNS, WriteError


class CsvWriter:
    """Serialize a header plus location rows with standard CSV quoting."""

    def __init__(
        self,
        *,
        header: Sequence[str] = LOCATION_COLUMNS,
        encoding: str = "utf-8",
        lineterminator: str = "\n",
    ):
        self.header = list(header)
        self.encoding = encoding
        self.lineterminator = lineterminator

    def _write_rows(self, handle, rows: Iterable[Sequence[str]]) -> None:
        writer = csv.writer(handle, quoting=csv.QUOTE_MINIMAL, lineterminator=self.lineterminator)
        writer.writerow(self.header)
        writer.writerows(rows)

    def write(self, rows: Iterable[Sequence[str]], output_path: Path | str) -> Path:
        """Write the header and ``rows`` to ``output_path``.

        The file is not replaced atomically; a failure part way through can
        leave a truncated file behind.
        """

        output_path = Path(output_path)
        try:
            with output_path.open("w", newline="", encoding=self.encoding) as handle:
                self._write_rows(handle, rows)
        except OSError as exc:
            raise WriteError(
                f"cannot write {output_path}: {exc.strerror or exc}",
                details={"path": str(output_path)},
            ) from exc
        return output_path

    def render(self, rows: Iterable[Sequence[str]]) -> str:
        """Return the CSV document as a string."""

        buffer = io.StringIO()
        self._write_rows(buffer, rows)
        return buffer.getvalue()

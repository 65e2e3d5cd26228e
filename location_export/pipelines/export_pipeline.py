"""Export pipeline orchestrator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from ..core import ExportSummary, SuggestQuery
from ..services import CsvWriter, RowMapper, SuggestClient, parse_placemarks

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ExportPipeline:
    """Fetch suggestions for a city and turn them into CSV rows."""

    client: SuggestClient
    mapper: RowMapper
    writer: CsvWriter

    def rows(self, query: SuggestQuery) -> list[list[str]]:
        """Fetch, parse and map every placemark for ``query``."""

        body = self.client.fetch(query)
        placemarks = parse_placemarks(body)
        logger.debug("Parsed %s placemark(s) for %r", len(placemarks), query.city_name)
        return self.mapper.map_all(placemarks)

    def run(self, query: SuggestQuery, output_path: Path | str) -> ExportSummary:
        logger.info("Exporting suggestions for %r from %s", query.city_name, query.url)
        created_at = datetime.now(timezone.utc)

        # All rows are mapped before the output file is opened.
        rows = self.rows(query)
        output_path = self.writer.write(rows, output_path)

        completed_at = datetime.now(timezone.utc)
        logger.info("Wrote %s row(s) to %s", len(rows), output_path)

        return ExportSummary(
            city_name=query.city_name,
            url=query.url,
            output_path=output_path,
            row_count=len(rows),
            created_at=created_at,
            completed_at=completed_at,
        )

    @classmethod
    def default(cls, **client_options) -> "ExportPipeline":
        return cls(
            client=SuggestClient(**client_options),
            mapper=RowMapper(),
            writer=CsvWriter(),
        )

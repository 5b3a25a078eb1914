"""
Batch URL parsing.

Runs a column of raw URLs through the parser and returns the components
as a Polars DataFrame, one output row per input row.
"""

import logging
from typing import Optional

import polars as pl

from domainer.parsing import DomainerError, URLParser

logger = logging.getLogger(__name__)

QUERY_DTYPE = pl.List(pl.Struct({"key": pl.Utf8, "value": pl.Utf8}))

OUTPUT_SCHEMA = {
    "full_url": pl.Utf8,
    "protocol": pl.Utf8,
    "subdomain": pl.Utf8,
    "hostname": pl.Utf8,
    "domain": pl.Utf8,
    "tld": pl.Utf8,
    "port": pl.Int64,
    "path": pl.Utf8,
    "query": QUERY_DTYPE,
    "fragment": pl.Utf8,
    "username": pl.Utf8,
    "password": pl.Utf8,
    "ip_address": pl.Utf8,
    "error": pl.Utf8,
    "error_stage": pl.Utf8,
}


class BatchParser:
    """
    Parse a DataFrame of URLs.

    Rows that fail keep their full_url and carry the error message and
    failing stage ('port', 'suffix' or 'resolution'); every other column
    is null for them. Null input cells fail with stage 'input' and a null
    full_url.
    """

    def __init__(self, parser: Optional[URLParser] = None):
        """
        Initialize batch parser.

        Args:
            parser: URL parser instance (creates new if None)
        """
        self.parser = parser or URLParser()
        self._parsed = 0
        self._failed = 0

    def parse_batch(
        self, df: pl.DataFrame, column: str = "url", resolve: bool = False
    ) -> pl.DataFrame:
        """
        Parse every URL in a column.

        Args:
            df: Input Polars DataFrame
            column: Name of the column holding raw URLs
            resolve: Also resolve each hostname to an address

        Returns:
            DataFrame with OUTPUT_SCHEMA, in input order

        Raises:
            ValueError: If column is missing from df
        """
        if column not in df.columns:
            raise ValueError(f"Column '{column}' not found in DataFrame")

        parse = self.parser.parse_with_resolution if resolve else self.parser.parse

        records = []
        for raw_url in df.get_column(column).to_list():
            if raw_url is None:
                logger.warning("Missing URL in column %r", column)
                self._failed += 1
                record = dict.fromkeys(OUTPUT_SCHEMA)
                record.update(error="Missing URL", error_stage="input")
                records.append(record)
                continue

            try:
                parsed = parse(raw_url)
            except DomainerError as e:
                logger.warning("Failed to parse URL %r: %s", raw_url, e)
                self._failed += 1
                record = dict.fromkeys(OUTPUT_SCHEMA)
                record.update(full_url=raw_url, error=str(e), error_stage=e.stage)
                records.append(record)
                continue

            self._parsed += 1
            record = parsed.to_dict()
            record["error"] = None
            record["error_stage"] = None
            records.append(record)

        if not records:
            return self._empty_dataframe()

        return pl.DataFrame(records, schema=OUTPUT_SCHEMA)

    def _empty_dataframe(self) -> pl.DataFrame:
        """Create empty DataFrame with correct schema."""
        return pl.DataFrame(schema=OUTPUT_SCHEMA)

    def get_stats(self) -> dict:
        """
        Get processing statistics.

        Returns:
            Dictionary with parsed and failed URL counts
        """
        return {
            "urls_parsed": self._parsed,
            "urls_failed": self._failed,
        }

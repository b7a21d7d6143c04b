"""
FRED (Federal Reserve Economic Data) adapter.

Used for the risk-free rate (default series IUDSOIA, the Bank of
England SONIA rate). Uses the CSV endpoint, no API key required.
"""

import csv
import logging
from io import StringIO

from ports import DataError, ParseError

from .base import BaseAdapter

logger = logging.getLogger(__name__)


class FredAdapter(BaseAdapter):
    """
    FRED series adapter.

    Uses CSV endpoint - no API key required.
    """

    BASE_URL = "https://fred.stlouisfed.org/graph/fredgraph.csv"

    @property
    def source_name(self) -> str:
        return "fred"

    def _request_csv(self, series_id: str) -> list[tuple[str, str]]:
        """Fetch (date, value) rows for a series, missing values dropped."""
        url = f"{self.BASE_URL}?id={series_id}"
        content = self._http_get_text(url)
        reader = csv.reader(StringIO(content))
        next(reader, None)  # Skip header
        return [(row[0], row[1]) for row in reader if len(row) >= 2 and row[1] != "."]

    def latest_value(self, series_id: str) -> float:
        """
        Most recent observation of a series.

        Raises:
            FetchError: On HTTP or network errors
            DataError: If the series has no observations
            ParseError: If the latest value is not numeric
        """
        rows = self._request_csv(series_id)
        if not rows:
            raise DataError.empty(self.source_name, f"No observations for {series_id}")

        date_str, value_str = rows[-1]
        try:
            value = float(value_str)
        except ValueError as e:
            raise ParseError(
                self.source_name, "csv", f"non-numeric value for {series_id}",
                raw_content=value_str, cause=e,
            ) from e

        logger.info(f"FRED {series_id} = {value} ({date_str})")
        return value

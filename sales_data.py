import logging
import re
import warnings
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, Sequence

import pandas as pd

from settings import DEFAULT_YEARS

logger = logging.getLogger(__name__)

DATE_COLUMN = "Date"
UNITS_COLUMN = "Units Sold"

Row = Mapping[str, str]

# optional whitespace, optional sign, then base-10 digits; anything after is ignored
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

LOAD_ERRORS = (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError)


class YearTotal(NamedTuple):
    year: str
    sales: int


def parse_units(value) -> Optional[int]:
    """Leading-digit integer parse of a 'Units Sold' cell.

    Missing or empty counts as 0; '150abc' -> 150; 'abc' -> None (row is skipped).
    """
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return 0
    text = str(value)
    if text == "":
        return 0
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))


def derive_year(value) -> Optional[str]:
    """Calendar year of a date string as 'YYYY', or None when it isn't a date."""
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not text:
        return None
    try:
        ts = pd.to_datetime(text, errors="coerce")
    except (ValueError, OverflowError, TypeError):
        return None
    if pd.isna(ts):
        return None
    return str(ts.year)


def aggregate(rows: Iterable[Row], years: Sequence[str] = DEFAULT_YEARS) -> List[YearTotal]:
    """Sum units sold per recognised year; malformed rows are skipped, never raised on."""
    totals: Dict[str, int] = {str(y): 0 for y in years}

    for row in rows:
        units = parse_units(row.get(UNITS_COLUMN))
        if units is None:
            continue
        year = derive_year(row.get(DATE_COLUMN))
        if year is None or year not in totals:
            continue
        totals[year] += units

    return [YearTotal(year, sales) for year, sales in totals.items()]


def filter_totals(totals: Iterable[YearTotal], threshold: float = 0) -> List[YearTotal]:
    return [t for t in totals if t.sales >= threshold]


def totals_frame(totals: Iterable[YearTotal]) -> pd.DataFrame:
    return pd.DataFrame([t._asdict() for t in totals], columns=["year", "sales"])


def _keep_ragged_row(fields: List[str]) -> List[str]:
    # the parser drops fields past the header width, like an unquoted comma in a product name
    logger.warning("Row has %d fields, extra ones ignored: %s", len(fields), fields)
    return fields


def load_rows(source: str) -> List[Dict[str, str]]:
    """Read the CSV at `source` (path or URL) into string-valued row dicts."""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", pd.errors.ParserWarning)
        df = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
            on_bad_lines=_keep_ragged_row,
        )
    logger.info("Loaded %d rows from %s", len(df), source)
    return df.to_dict("records")


def load_yearly_totals(source: str, years: Sequence[str] = DEFAULT_YEARS) -> List[YearTotal]:
    """Load + aggregate. A failed fetch/parse leaves the display state empty."""
    try:
        rows = load_rows(source)
    except LOAD_ERRORS:
        logger.exception("CSV load failed for %s", source)
        return []

    totals = aggregate(rows, years)
    logger.debug("Yearly totals: %s", {t.year: t.sales for t in totals})
    return totals

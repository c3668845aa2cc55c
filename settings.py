import argparse
import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Optional, Tuple

DEFAULT_CSV_PATH = "data/Supplement_Sales_Weekly_Expanded.csv"
DEFAULT_YEARS = ("2022", "2023", "2024")
DEFAULT_LOG_LEVEL = "INFO"


def parse_years(value: str) -> Tuple[str, ...]:
    """Turn '2022, 2023,2024' into ('2022', '2023', '2024')."""
    years = tuple(part.strip() for part in (value or "").split(",") if part.strip())
    if not years:
        raise ValueError("At least one year is required (e.g. SALES_YEARS=2022,2023,2024).")
    bad = [y for y in years if not y.isdigit()]
    if bad:
        raise ValueError(f"Years must be numeric, got: {bad}")
    return years


def parse_log_level(value: str) -> int:
    level = logging.getLevelName((value or DEFAULT_LOG_LEVEL).strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


@dataclass(frozen=True)
class Settings:
    csv_path: str = DEFAULT_CSV_PATH
    years: Tuple[str, ...] = DEFAULT_YEARS
    log_level: int = logging.INFO

    @classmethod
    def load(cls, argv: Optional[List[str]] = None, environ=None) -> "Settings":
        """Env vars first, then any script args (`streamlit run app.py -- --input x.csv`)."""
        env = os.environ if environ is None else environ

        parser = argparse.ArgumentParser(description="Supplement Sales Dashboard")
        parser.add_argument("-i", "--input", default=None, help="CSV path or URL with Date / Units Sold columns")
        parser.add_argument("--years", default=None, help="Comma-separated years to aggregate")
        parser.add_argument("--log-level", default=None)

        # streamlit hands the script everything after "--" as sys.argv[1:]
        args, _ = parser.parse_known_args(sys.argv[1:] if argv is None else argv)

        return cls(
            csv_path=args.input or env.get("SALES_CSV_PATH") or DEFAULT_CSV_PATH,
            years=parse_years(args.years or env.get("SALES_YEARS") or ",".join(DEFAULT_YEARS)),
            log_level=parse_log_level(args.log_level or env.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL),
        )

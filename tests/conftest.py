import pytest
from pathlib import Path


@pytest.fixture()
def sales_csv(tmp_path: Path) -> Path:
    """Minimal weekly sales CSV with good, malformed and out-of-range rows."""
    path = tmp_path / "Supplement_Sales_Weekly_Expanded.csv"
    path.write_text(
        "Date,Product Name,Units Sold,Revenue\n"
        "2022-01-03,Whey Protein,100,3198.00\n"
        "2023-05-01,Vitamin C,10,425.10\n"
        "\n"
        "2023-06-01,Fish Oil,5abc,63.25\n"
        "not a date,Zinc,999,0\n"
        "2024-02-05,Biotin,abc,0\n"
        "2024-09-30,Melatonin,,0\n"
        "2021-12-27,Creatine,77,0\n"
        ",Collagen,50,0\n"
    )
    return path


@pytest.fixture()
def default_totals():
    from sales_data import YearTotal

    return [YearTotal("2022", 0), YearTotal("2023", 15), YearTotal("2024", 0)]

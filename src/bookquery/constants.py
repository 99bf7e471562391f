from pathlib import Path
from typing import Final

# src/bookquery/constants.py -> ../.. -> project root
PROJECT_ROOT: Final[Path] = Path(__file__).resolve().parent.parent.parent

MIN_RATING: Final[float] = 0.0
MAX_RATING: Final[float] = 5.0
MIN_PUBLICATION_YEAR: Final[int] = 1500

# Number of trailing characters of publication_date that hold the year
YEAR_WIDTH: Final[int] = 4

# Derived years have at most YEAR_WIDTH digits, so any larger bound behaves
# like this one
YEAR_BOUND_CEILING: Final[int] = 10**YEAR_WIDTH

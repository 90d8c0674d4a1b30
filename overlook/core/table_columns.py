"""
table_columns.py

Raw data table columns for each dataset.
"""

from typing import Dict, List

from overlook.core.flight_analysis import (
    STATUS_DELAYED,
    STATUS_LATE,
    STATUS_ON_TIME,
    row_status,
)
from overlook.core.table_spec import (
    Badge,
    ColumnSpec,
    Currency,
    FixedDecimal,
    Grouped,
    Percentage,
    Plain,
    YesNo,
)

CELSIUS = FixedDecimal(precision=1, suffix="°C")
MILLIMETRES = FixedDecimal(precision=1, suffix=" mm")
KM_PER_HOUR = FixedDecimal(precision=1, suffix=" km/h")
DELAY_MINUTES = FixedDecimal(precision=0, suffix=" min", signed=True)
MINUTES = FixedDecimal(precision=0, suffix=" min")
MILES = FixedDecimal(precision=0, suffix=" miles")
COUNT = FixedDecimal(precision=0)

FLIGHT_STATUS_BADGE = Badge(
    tones=(
        (STATUS_DELAYED, "destructive"),
        (STATUS_LATE, "warning"),
        (STATUS_ON_TIME, "success"),
    )
)

WEATHER_COLUMNS: List[ColumnSpec] = [
    ColumnSpec("MinTemp", "Min Temp", CELSIUS),
    ColumnSpec("MaxTemp", "Max Temp", CELSIUS),
    ColumnSpec("Rainfall", "Rainfall", MILLIMETRES),
    ColumnSpec("WindGustSpeed", "Wind Gust", KM_PER_HOUR),
    ColumnSpec("Humidity9am", "Humidity 9am", Percentage(0)),
    ColumnSpec("Humidity3pm", "Humidity 3pm", Percentage(0)),
    ColumnSpec("RainToday", "Rain Today", YesNo()),
    ColumnSpec("RainTomorrow", "Rain Tomorrow", YesNo()),
]

FLIGHT_COLUMNS: List[ColumnSpec] = [
    ColumnSpec("FL_DATE", "Flight Date"),
    ColumnSpec("DEP_TIME", "Departure Time"),
    ColumnSpec("ARR_TIME", "Arrival Time"),
    ColumnSpec("DEP_DELAY", "Departure Delay", DELAY_MINUTES),
    ColumnSpec("ARR_DELAY", "Arrival Delay", DELAY_MINUTES),
    ColumnSpec("AIR_TIME", "Air Time", MINUTES),
    ColumnSpec("DISTANCE", "Distance", MILES),
    ColumnSpec(
        "status", "Status", FLIGHT_STATUS_BADGE, sortable=False, derived=row_status
    ),
]

HOUSE_PRICE_COLUMNS: List[ColumnSpec] = [
    ColumnSpec("id", "ID"),
    ColumnSpec("price", "Price", Currency("USD", 0)),
    ColumnSpec("area", "Area (sq ft)", Grouped()),
    ColumnSpec("furnishingstatus", "Furnishing", Plain()),
    ColumnSpec("bedrooms", "Beds", COUNT),
    ColumnSpec("bathrooms", "Baths", COUNT),
    ColumnSpec("stories", "Stories", COUNT),
    ColumnSpec("mainroad", "Main Road"),
    ColumnSpec("prefarea", "Preferred Area"),
    ColumnSpec("airconditioning", "AC"),
]

TABLE_COLUMNS: Dict[str, List[ColumnSpec]] = {
    "weather": WEATHER_COLUMNS,
    "flights": FLIGHT_COLUMNS,
    "house_prices": HOUSE_PRICE_COLUMNS,
}

# /config/custom_components/yomicycle/yomicycle_lib/hebrew.py

"""
Hebrew day source for the rotations, built on pyluach.

Requires:
    pip install pyluach
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from pyluach.hebrewcal import HebrewDate as PHebrewDate, Year

MIN_DAY = 1
MAX_DAY = 30


@dataclass(frozen=True)
class HebrewToday:
    """Hebrew day-of-month (1-30) plus the display label used to match overrides."""

    day: int
    label: str
    date: date


def int_to_hebrew(num: int) -> str:
    """
    Convert an integer (1–400+) into Hebrew letters with geresh/gershayim.
    E.g. 5 → 'ה׳', 15 → 'ט״ו', 100 → 'ק׳', 119 → 'קי״ט'
    """
    mapping = [
        (400, "ת"), (300, "ש"), (200, "ר"), (100, "ק"),
        (90,  "צ"),  (80,  "פ"),  (70,  "ע"),  (60,  "ס"),  (50,  "נ"),
        (40,  "מ"),  (30,  "ל"),  (20,  "כ"),  (10,  "י"),
        (9,   "ט"),  (8,   "ח"),  (7,   "ז"),  (6,   "ו"),  (5,   "ה"),
        (4,   "ד"),  (3,   "ג"),  (2,   "ב"),  (1,   "א"),
    ]

    # 15 and 16 are spelled ט״ו / ט״ז, never with the Name
    tail = ""
    rest = num
    if num % 100 in (15, 16):
        tail = "טו" if num % 100 == 15 else "טז"
        rest = num - num % 100

    result = ""
    for value, letter in mapping:
        while rest >= value:
            result += letter
            rest -= value
    result += tail

    if len(result) > 1:
        return f"{result[:-1]}״{result[-1]}"
    return f"{result}׳"


def clean_geresh(s: str) -> str:
    """Strip any geresh/gershayim."""
    return s.replace("׳", "").replace("״", "")


def normalize_hebrew_punct(txt: str) -> str:
    """Convert Hebrew geresh/gershayim to ASCII quotes."""
    return txt.replace("״", '"').replace("׳", "'")


def hebrew_month_name(month: int, year: int) -> str:
    """
    Map pyluach month-numbers to Hebrew month names, handling leap years.
    """
    if month == 12:
        return "אדר א׳" if Year(year).leap else "אדר"
    if month == 13:
        return "אדר ב׳"
    return {
        1:  "ניסן",
        2:  "אייר",
        3:  "סיון",
        4:  "תמוז",
        5:  "אב",
        6:  "אלול",
        7:  "תשרי",
        8:  "חשון",
        9:  "כסלו",
        10: "טבת",
        11: "שבט",
    }.get(month, "")


def clamp_day(day: int) -> int:
    """Keep a day-of-month inside 1..30."""
    return max(MIN_DAY, min(MAX_DAY, int(day)))


def format_hebrew_date(heb: PHebrewDate) -> str:
    """'כ"ה כסלו תשפ"ו' style label, same as the calendar's Date sensor."""
    day_heb = int_to_hebrew(heb.day)
    month_heb = hebrew_month_name(heb.month, heb.year)
    year_heb = int_to_hebrew(heb.year % 1000)
    return normalize_hebrew_punct(f"{day_heb} {month_heb} {year_heb}")


def hebrew_today(py_date: date) -> HebrewToday:
    """Hebrew day and label for a civil date."""
    heb = PHebrewDate.from_pydate(py_date)
    return HebrewToday(
        day=clamp_day(heb.day),
        label=format_hebrew_date(heb),
        date=py_date,
    )


def effective_date(now: datetime, switch_time: datetime | None = None) -> date:
    """
    Civil date whose Hebrew date counts as "today".

    Once `now` has passed `switch_time` (nightfall) the Hebrew day has already
    turned, so the next civil date is used. Without a switch time the day
    turns at midnight.
    """
    if switch_time is not None and now >= switch_time:
        return now.date() + timedelta(days=1)
    return now.date()

"""Lunar year encoding table (1900-2099) and month/year length helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

MIN_YEAR = 1900
MAX_YEAR = 2099

# Lunar 1900 正月初一.
BASE_DATE = date(1900, 1, 31)

# Encoding per year:
# - low 4 bits: leap month (0 means no leap month)
# - bit 16 (0x10000): leap month length (1 -> 30 days, 0 -> 29 days)
# - bits 15..4: month lengths for months 1..12 (1 -> 30 days, 0 -> 29 days)
LUNAR_DATA = (
    # 1900-1909
    0x04BD8, 0x04AE0, 0x0A570, 0x054D5, 0x0D260, 0x0D950, 0x16554, 0x056A0, 0x09AD0, 0x055D2,
    # 1910-1919
    0x04AE0, 0x0A5B6, 0x0A4D0, 0x0D250, 0x1D255, 0x0B540, 0x0D6A0, 0x0ADA2, 0x095B0, 0x14977,
    # 1920-1929
    0x04970, 0x0A4B0, 0x0B4B5, 0x06A50, 0x06D40, 0x1AB54, 0x02B60, 0x09570, 0x052F2, 0x04970,
    # 1930-1939
    0x06566, 0x0D4A0, 0x0EA50, 0x16A95, 0x05AD0, 0x02B60, 0x186E3, 0x092E0, 0x1C8D7, 0x0C950,
    # 1940-1949
    0x0D4A0, 0x1D8A6, 0x0B550, 0x056A0, 0x1A5B4, 0x025D0, 0x092D0, 0x0D2B2, 0x0A950, 0x0B557,
    # 1950-1959
    0x06CA0, 0x0B550, 0x15355, 0x04DA0, 0x0A5B0, 0x14573, 0x052B0, 0x0A9A8, 0x0E950, 0x06AA0,
    # 1960-1969
    0x0AEA6, 0x0AB50, 0x04B60, 0x0AAE4, 0x0A570, 0x05260, 0x0F263, 0x0D950, 0x05B57, 0x056A0,
    # 1970-1979
    0x096D0, 0x04DD5, 0x04AD0, 0x0A4D0, 0x0D4D4, 0x0D250, 0x0D558, 0x0B540, 0x0B6A0, 0x195A6,
    # 1980-1989
    0x095B0, 0x049B0, 0x0A974, 0x0A4B0, 0x0B27A, 0x06A50, 0x06D40, 0x0AF46, 0x0AB60, 0x09570,
    # 1990-1999
    0x04AF5, 0x04970, 0x064B0, 0x074A3, 0x0EA50, 0x06B58, 0x05AC0, 0x0AB60, 0x096D5, 0x092E0,
    # 2000-2009
    0x0C960, 0x0D954, 0x0D4A0, 0x0DA50, 0x07552, 0x056A0, 0x0ABB7, 0x025D0, 0x092D0, 0x0CAB5,
    # 2010-2019
    0x0A950, 0x0B4A0, 0x0BAA4, 0x0AD50, 0x055D9, 0x04BA0, 0x0A5B0, 0x15176, 0x052B0, 0x0A930,
    # 2020-2029
    0x07954, 0x06AA0, 0x0AD50, 0x05B52, 0x04B60, 0x0A6E6, 0x0A4E0, 0x0D260, 0x0EA65, 0x0D530,
    # 2030-2039
    0x05AA0, 0x076A3, 0x096D0, 0x04AFB, 0x04AD0, 0x0A4D0, 0x1D0B6, 0x0D250, 0x0D520, 0x0DD45,
    # 2040-2049
    0x0B5A0, 0x056D0, 0x055B2, 0x049B0, 0x0A577, 0x0A4B0, 0x0AA50, 0x1B255, 0x06D20, 0x0ADA0,
    # 2050-2059
    0x14B63, 0x09370, 0x049F8, 0x04970, 0x064B0, 0x168A6, 0x0EA50, 0x06B20, 0x1A6C4, 0x0AAE0,
    # 2060-2069
    0x092E0, 0x0D2E3, 0x0C960, 0x0D557, 0x0D4A0, 0x0DA50, 0x05D55, 0x056A0, 0x0A6D0, 0x055D4,
    # 2070-2079
    0x052D0, 0x0A9B8, 0x0A950, 0x0B4A0, 0x0B6A6, 0x0AD50, 0x055A0, 0x0ABA4, 0x0A5B0, 0x052B0,
    # 2080-2089
    0x0B273, 0x06930, 0x07337, 0x06AA0, 0x0AD50, 0x14B55, 0x04B60, 0x0A570, 0x054E4, 0x0D160,
    # 2090-2099
    0x0E968, 0x0D520, 0x0DAA0, 0x16AA6, 0x056D0, 0x04AE0, 0x0A9D4, 0x0A2D0, 0x0D150, 0x0F252,
)


@dataclass(frozen=True)
class YearInfo:
    """Decoded lunar year: leap month, month lengths and total length."""

    year: int
    leap_month: int
    month_days: tuple[int, ...]
    leap_days: int

    @property
    def total_days(self) -> int:
        return sum(self.month_days) + self.leap_days

    @property
    def has_leap_month(self) -> bool:
        return self.leap_month != 0


def decode_year(year: int, encoding: int) -> YearInfo:
    """Unpack one table entry into a YearInfo."""
    leap = encoding & 0xF
    months = tuple(30 if encoding & (0x10000 >> m) else 29 for m in range(1, 13))
    if leap == 0:
        leap_len = 0
    else:
        leap_len = 30 if encoding & 0x10000 else 29
    return YearInfo(year=year, leap_month=leap, month_days=months, leap_days=leap_len)


YEAR_INFOS = tuple(decode_year(MIN_YEAR + i, value) for i, value in enumerate(LUNAR_DATA))


def year_info(year: int) -> YearInfo:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValueError(f"lunar year out of range {MIN_YEAR}-{MAX_YEAR}: {year}")
    return YEAR_INFOS[year - MIN_YEAR]


def leap_month(year: int) -> int:
    return year_info(year).leap_month


def leap_days(year: int) -> int:
    return year_info(year).leap_days


def month_days(year: int, month: int) -> int:
    if month < 1 or month > 12:
        raise ValueError(f"invalid lunar month: {month}")
    return year_info(year).month_days[month - 1]


def year_days(year: int) -> int:
    return year_info(year).total_days

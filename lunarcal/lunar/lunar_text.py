"""Chinese names, festivals and solar terms for lunar dates (1900-2099)."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

from .lunar_convert import LunarCalendarError, LunarDate, solar_to_lunar
from .lunar_data import MAX_YEAR, MIN_YEAR, month_days

LUNAR_MONTH_NAMES = ["正", "二", "三", "四", "五", "六", "七", "八", "九", "十", "冬", "腊"]
LUNAR_DAY_NAMES = [
    "初一",
    "初二",
    "初三",
    "初四",
    "初五",
    "初六",
    "初七",
    "初八",
    "初九",
    "初十",
    "十一",
    "十二",
    "十三",
    "十四",
    "十五",
    "十六",
    "十七",
    "十八",
    "十九",
    "二十",
    "廿一",
    "廿二",
    "廿三",
    "廿四",
    "廿五",
    "廿六",
    "廿七",
    "廿八",
    "廿九",
    "三十",
]

HEAVENLY_STEMS = ["甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸"]
EARTHLY_BRANCHES = ["子", "丑", "寅", "卯", "辰", "巳", "午", "未", "申", "酉", "戌", "亥"]
ZODIAC_ANIMALS = ["鼠", "牛", "虎", "兔", "龙", "蛇", "马", "羊", "猴", "鸡", "狗", "猪"]

SOLAR_TERM_NAMES = [
    "小寒",
    "大寒",
    "立春",
    "雨水",
    "惊蛰",
    "春分",
    "清明",
    "谷雨",
    "立夏",
    "小满",
    "芒种",
    "夏至",
    "小暑",
    "大暑",
    "立秋",
    "处暑",
    "白露",
    "秋分",
    "寒露",
    "霜降",
    "立冬",
    "小雪",
    "大雪",
    "冬至",
]

# Minutes offset from 1900-01-06 02:05 for each solar term.
SOLAR_TERM_INFO = [
    0,
    21208,
    42467,
    63836,
    85337,
    107014,
    128867,
    150921,
    173149,
    195551,
    218072,
    240693,
    263343,
    285989,
    308563,
    331033,
    353350,
    375494,
    397447,
    419210,
    440795,
    462224,
    483532,
    504758,
]

# (month, day) of ordinary (non-leap) lunar months.
LUNAR_HOLIDAYS = {
    (1, 1): "春节",
    (1, 15): "元宵节",
    (5, 5): "端午节",
    (7, 7): "七夕",
    (8, 15): "中秋节",
    (9, 9): "重阳节",
    (12, 8): "腊八节",
}

SOLAR_HOLIDAYS = {
    (1, 1): "元旦",
    (5, 1): "劳动节",
    (10, 1): "国庆节",
    (12, 25): "圣诞节",
}

NEW_YEARS_EVE = "除夕"


def month_name(month: int, is_leap: bool = False) -> str:
    """'正月', '闰二月', '腊月'."""
    name = f"{LUNAR_MONTH_NAMES[month - 1]}月"
    return f"闰{name}" if is_leap else name


def day_name(day: int) -> str:
    return LUNAR_DAY_NAMES[day - 1]


def format_lunar_date(lunar: LunarDate) -> str:
    """Return lunar date text, e.g. '正月初三' or '闰二月十五'."""
    return f"{month_name(lunar.month, lunar.is_leap_month)}{day_name(lunar.day)}"


def year_ganzhi(year: int) -> str:
    """Sexagenary name of a lunar year, e.g. 2023 -> '癸卯'."""
    return HEAVENLY_STEMS[(year - 4) % 10] + EARTHLY_BRANCHES[(year - 4) % 12]


def zodiac(year: int) -> str:
    return ZODIAC_ANIMALS[(year - 4) % 12]


def format_lunar_full(lunar: LunarDate) -> str:
    """'癸卯兔年 闰二月初一'."""
    return f"{year_ganzhi(lunar.year)}{zodiac(lunar.year)}年 {format_lunar_date(lunar)}"


def _lunar_or_none(value: date) -> Optional[LunarDate]:
    try:
        return solar_to_lunar(value)
    except LunarCalendarError:
        return None


def _solar_term_day(year: int, index: int) -> int:
    # Standard approximation formula for 1900-2100.
    minutes = 525948.76 * (year - 1900) + SOLAR_TERM_INFO[index]
    dt = datetime(1900, 1, 6, 2, 5) + timedelta(minutes=minutes)
    return dt.day


def get_solar_term(value: date) -> Optional[str]:
    """Return solar term name for the date, otherwise None."""
    if value.year < MIN_YEAR or value.year > MAX_YEAR:
        return None

    for i in (value.month - 1) * 2, (value.month - 1) * 2 + 1:
        if value.day == _solar_term_day(value.year, i):
            return SOLAR_TERM_NAMES[i]
    return None


def get_holiday(value: date) -> Optional[str]:
    """Return holiday name or None."""
    lunar = _lunar_or_none(value)
    if lunar is not None and not lunar.is_leap_month:
        holiday = LUNAR_HOLIDAYS.get((lunar.month, lunar.day))
        if holiday is not None:
            return holiday
        if lunar.month == 12 and lunar.day == month_days(lunar.year, 12):
            return NEW_YEARS_EVE
    return SOLAR_HOLIDAYS.get((value.month, value.day))


def get_special_day(value: date) -> Optional[str]:
    """Return holiday first, then solar term, otherwise None."""
    holiday = get_holiday(value)
    if holiday is not None:
        return holiday
    return get_solar_term(value)

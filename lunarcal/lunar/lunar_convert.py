"""
公历 / 农历互转

以 1900-01-31（农历 1900 年正月初一）为基准，按天数偏移逐年、逐月扣减，
支持 1900-01-31 到 2099-12-31 的公历日期。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional

from .lunar_data import BASE_DATE, MAX_YEAR, MIN_YEAR, year_info
from .time_ext import diff_days, start_of_day

logger = logging.getLogger(__name__)

MAX_SOLAR_DATE = date(2099, 12, 31)


class LunarCalendarError(ValueError):
    """农历转换错误基类。"""


class OutOfRangeError(LunarCalendarError):
    """公历日期超出 1900-01-31 ~ 2099-12-31。"""


class InvalidLunarDateError(LunarCalendarError):
    """农历日期不合法（年/月/日或闰月标记不匹配）。"""


@dataclass(frozen=True)
class LunarDate:
    """农历日期。构造时不校验，校验见 validate_lunar_date。"""

    year: int
    month: int
    day: int
    is_leap_month: bool = False


def _calendar_day(value: date, tz: Optional[tzinfo]) -> date:
    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        return start_of_day(value).date()
    return value


def solar_to_lunar(value: date, tz: Optional[tzinfo] = None) -> LunarDate:
    """
    公历转农历。

    Args:
        value: date 或 datetime；时分秒被截断，按其自身时区的当天计算
        tz: 若给出且 value 带时区，先换算到该时区再取当天

    Raises:
        OutOfRangeError: 日期不在 1900-01-31 ~ 2099-12-31
    """
    day = _calendar_day(value, tz)
    if day < BASE_DATE or day > MAX_SOLAR_DATE:
        logger.debug("solar date out of range: %s", day)
        raise OutOfRangeError(
            f"仅支持 {BASE_DATE:%Y-%m-%d} 到 {MAX_SOLAR_DATE:%Y-%m-%d} 范围的农历转换: {day}"
        )

    offset = diff_days(BASE_DATE, day)

    lunar_year = MIN_YEAR
    while lunar_year <= MAX_YEAR:
        total = year_info(lunar_year).total_days
        if offset < total:
            break
        offset -= total
        lunar_year += 1

    if lunar_year > MAX_YEAR:
        raise OutOfRangeError(f"年份超出可支持范围: {day}")

    info = year_info(lunar_year)
    for month in range(1, 13):
        days = info.month_days[month - 1]
        if offset < days:
            return LunarDate(lunar_year, month, offset + 1, False)
        offset -= days

        # 闰月紧跟在同号普通月之后
        if month == info.leap_month:
            if offset < info.leap_days:
                return LunarDate(lunar_year, month, offset + 1, True)
            offset -= info.leap_days

    # 年长度等于各月之和，走到这里说明编码表自相矛盾
    raise OutOfRangeError(f"年内月份扣减失败: {day}")


def validate_lunar_date(lunar: LunarDate) -> None:
    """校验农历日期，不合法时抛出 InvalidLunarDateError。"""
    if lunar.year < MIN_YEAR or lunar.year > MAX_YEAR:
        raise InvalidLunarDateError(f"仅支持 {MIN_YEAR}-{MAX_YEAR} 年的农历转换: {lunar.year}")
    if lunar.month < 1 or lunar.month > 12:
        raise InvalidLunarDateError(f"农历月需在 1-12 范围内: {lunar.month}")

    info = year_info(lunar.year)
    if lunar.is_leap_month:
        if info.leap_month != lunar.month:
            raise InvalidLunarDateError(
                f"{lunar.year} 年无闰{lunar.month}月（闰月: {info.leap_month or '无'}）"
            )
        limit = info.leap_days
    else:
        limit = info.month_days[lunar.month - 1]

    if lunar.day < 1 or lunar.day > limit:
        raise InvalidLunarDateError(f"农历日需在 1-{limit} 范围内: {lunar.day}")


def lunar_to_solar(lunar: LunarDate, tz: Optional[tzinfo] = None) -> datetime:
    """
    农历转公历，返回目标时区当天 00:00:00。

    tz 为 None 时返回不带时区的 datetime。
    """
    try:
        validate_lunar_date(lunar)
    except InvalidLunarDateError as e:
        logger.debug("invalid lunar date %s: %s", lunar, e)
        raise

    offset = sum(year_info(y).total_days for y in range(MIN_YEAR, lunar.year))

    info = year_info(lunar.year)
    for month in range(1, lunar.month):
        offset += info.month_days[month - 1]
        if month == info.leap_month:
            offset += info.leap_days

    # 闰月在同号普通月之后
    if lunar.is_leap_month:
        offset += info.month_days[lunar.month - 1]

    offset += lunar.day - 1

    solar = BASE_DATE + timedelta(days=offset)
    return datetime(solar.year, solar.month, solar.day, tzinfo=tz)

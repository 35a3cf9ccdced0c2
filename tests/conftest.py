"""
测试共享 Fixtures

提供所有测试模块共享的配置、时区和农历数据。
"""

from __future__ import annotations

from zoneinfo import ZoneInfo

import pytest

from lunarcal.config import Config
from lunarcal.lunar.lunar_convert import LunarDate

# ═══════════════════════════════════════════════════════════
# 时区 Fixtures
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def shanghai_tz() -> ZoneInfo:
    """东八区。"""
    return ZoneInfo("Asia/Shanghai")


@pytest.fixture
def new_york_tz() -> ZoneInfo:
    """有夏令时的时区。"""
    return ZoneInfo("America/New_York")


# ═══════════════════════════════════════════════════════════
# 配置 Fixtures
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def test_config(shanghai_tz: ZoneInfo) -> Config:
    """创建测试配置。"""
    return Config(
        timezone=shanghai_tz,
        log_level="DEBUG",
        date_format="%Y-%m-%d",
    )


# ═══════════════════════════════════════════════════════════
# 农历数据 Fixtures
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def spring_festivals() -> dict:
    """公历春节日期（农历正月初一）。"""
    return {
        1901: (1901, 2, 19),
        2021: (2021, 2, 12),
        2023: (2023, 1, 22),
        2024: (2024, 2, 10),
        2025: (2025, 1, 29),
        2026: (2026, 2, 17),
    }


@pytest.fixture
def leap_month_2023() -> LunarDate:
    """2023 年闰二月初一（公历 2023-03-22）。"""
    return LunarDate(2023, 2, 1, True)

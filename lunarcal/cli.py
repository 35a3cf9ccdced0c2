from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import NoReturn, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import Config
from .lunar.lunar_convert import LunarCalendarError, LunarDate, lunar_to_solar, solar_to_lunar
from .lunar.lunar_data import year_info
from .lunar.lunar_text import (
    format_lunar_date,
    format_lunar_full,
    get_special_day,
    month_name,
    year_ganzhi,
    zodiac,
)
from .lunar.time_ext import add_days, days_in_month

app = typer.Typer(help="lunarcal — 公历 / 农历互转工具 (1900-2099)")
console = Console()
logger = logging.getLogger(__name__)

_state: dict[str, Config] = {}


def _config() -> Config:
    if "config" not in _state:
        _state["config"] = Config.from_env()
    return _state["config"]


def _resolve_tz(name: Optional[str]) -> tzinfo:
    if not name:
        return _config().timezone
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        console.print(f"[red]❌ 无法识别时区: {name}[/red]")
        raise typer.Exit(1)


def _parse_date(text: str, fmt: str) -> datetime:
    try:
        return datetime.strptime(text.strip(), fmt)
    except ValueError:
        console.print(f"[red]❌ 日期格式错误: {text}（应为 {fmt}）[/red]")
        raise typer.Exit(1)


def _fail(err: LunarCalendarError) -> NoReturn:
    logger.debug("conversion failed: %s", err)
    console.print(f"[red]❌ {err}[/red]")
    raise typer.Exit(1)


@app.callback()
def main(
    env_file: Optional[str] = typer.Option(None, "--env-file", help="指定 .env 配置文件"),
) -> None:
    """加载配置并初始化日志"""
    config = Config.from_env(env_path=env_file)
    _state["config"] = config

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, config.log_level, logging.INFO),
    )
    logger.debug("配置加载完成: tz=%s", config.timezone)


@app.command("to-lunar")
def to_lunar(
    date_text: str = typer.Argument(..., metavar="DATE", help="公历日期，如 2023-01-22"),
    tz: Optional[str] = typer.Option(None, "--tz", help="时区（默认取配置）"),
):
    """公历转农历"""
    config = _config()
    solar = _parse_date(date_text, config.date_format).replace(tzinfo=_resolve_tz(tz))

    try:
        lunar = solar_to_lunar(solar)
    except LunarCalendarError as e:
        _fail(e)

    special = get_special_day(solar.date())
    leap = "（闰月）" if lunar.is_leap_month else ""
    body = (
        f"公历: {solar:{config.date_format}}\n"
        f"农历: {lunar.year} 年 {lunar.month} 月 {lunar.day} 日{leap}\n"
        f"中文: {format_lunar_full(lunar)}\n"
        f"节日/节气: {special or '-'}"
    )
    console.print(Panel.fit(body, title="公历 → 农历", style="bold green"))


@app.command("to-solar")
def to_solar(
    year: int = typer.Argument(..., help="农历年"),
    month: int = typer.Argument(..., help="农历月 (1-12)"),
    day: int = typer.Argument(..., help="农历日 (1-30)"),
    leap: bool = typer.Option(False, "--leap", "-l", help="是否闰月"),
    tz: Optional[str] = typer.Option(None, "--tz", help="时区（默认取配置）"),
):
    """农历转公历"""
    config = _config()
    lunar = LunarDate(year, month, day, leap)

    try:
        solar = lunar_to_solar(lunar, _resolve_tz(tz))
    except LunarCalendarError as e:
        _fail(e)

    body = (
        f"农历: {year_ganzhi(year)}{zodiac(year)}年 {format_lunar_date(lunar)}\n"
        f"公历: {solar:{config.date_format}} ({solar.tzinfo})"
    )
    console.print(Panel.fit(body, title="农历 → 公历", style="bold cyan"))


@app.command("year")
def year_cmd(year: int = typer.Argument(..., help="农历年")):
    """列出农历某年各月大小与起始公历日期"""
    config = _config()
    try:
        first_day = lunar_to_solar(LunarDate(year, 1, 1))
    except LunarCalendarError as e:
        _fail(e)

    info = year_info(year)
    table = Table(title=f"{year} {year_ganzhi(year)}{zodiac(year)}年")
    table.add_column("月份")
    table.add_column("天数", justify="right")
    table.add_column("初一（公历）")

    start = first_day
    for m in range(1, 13):
        days = info.month_days[m - 1]
        table.add_row(month_name(m), str(days), f"{start:{config.date_format}}")
        start = add_days(start, days)
        if m == info.leap_month:
            table.add_row(month_name(m, True), str(info.leap_days), f"{start:{config.date_format}}")
            start = add_days(start, info.leap_days)

    console.print(table)
    leap_text = month_name(info.leap_month, True) if info.has_leap_month else "无"
    console.print(f"全年 [bold]{info.total_days}[/bold] 天，闰月: {leap_text}")


@app.command("month")
def month_cmd(
    year_month: str = typer.Argument(..., metavar="YYYY-MM", help="公历年月，如 2024-02"),
):
    """列出公历某月每天对应的农历"""
    config = _config()
    start = _parse_date(f"{year_month}-01", "%Y-%m-%d")

    table = Table(title=f"{start:%Y-%m}")
    table.add_column("公历")
    table.add_column("农历")
    table.add_column("节日/节气")

    for offset in range(days_in_month(start.year, start.month)):
        current = add_days(start, offset)
        try:
            lunar_text = format_lunar_date(solar_to_lunar(current))
        except LunarCalendarError as e:
            # 超出 1900-01-31 ~ 2099-12-31 的日期只占位，不中断整月输出
            logger.debug("skip %s: %s", current.date(), e)
            lunar_text = "-"
        table.add_row(
            f"{current:{config.date_format}}",
            lunar_text,
            get_special_day(current.date()) or "",
        )

    console.print(table)


if __name__ == "__main__":
    app()

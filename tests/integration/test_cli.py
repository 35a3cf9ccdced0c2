"""
命令行集成测试

通过 typer 的 CliRunner 跑完整命令，验证输出与退出码。
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from typer.testing import CliRunner, Result

from lunarcal.cli import app

ENV = {
    "LUNARCAL_TZ": "Asia/Shanghai",
    "LUNARCAL_LOG_LEVEL": "INFO",
    "LUNARCAL_DATE_FORMAT": "%Y-%m-%d",
    "COLUMNS": "120",
}


def _write_env(path: Path, values: dict[str, str]) -> Path:
    path.write_text("".join(f"{k}={v}\n" for k, v in values.items()), encoding="utf-8")
    return path


@pytest.fixture
def env_file(tmp_path: Path) -> Path:
    """每个测试独立的 .env，避免读到本机的 .env 文件。"""
    return _write_env(tmp_path / "test.env", {k: v for k, v in ENV.items() if k.startswith("LUNARCAL_")})


@pytest.fixture
def invoke(env_file: Path) -> Callable[..., Result]:
    """通过 --env-file 运行命令，不走默认的 .env 搜索。"""
    runner = CliRunner()

    def _invoke(*args: str, env_path: Path | None = None) -> Result:
        path = env_path or env_file
        return runner.invoke(app, ["--env-file", str(path), *args], env=ENV)

    return _invoke


@pytest.mark.integration
class TestToLunar:
    """测试 to-lunar 命令。"""

    def test_spring_festival(self, invoke: Callable[..., Result]) -> None:
        result = invoke("to-lunar", "2023-01-22")

        assert result.exit_code == 0, result.output
        assert "癸卯兔年 正月初一" in result.output
        assert "春节" in result.output

    def test_leap_month_marker(self, invoke: Callable[..., Result]) -> None:
        result = invoke("to-lunar", "2023-03-22")

        assert result.exit_code == 0, result.output
        assert "闰二月初一" in result.output
        assert "闰月" in result.output

    def test_out_of_range(self, invoke: Callable[..., Result]) -> None:
        result = invoke("to-lunar", "1900-01-30")

        assert result.exit_code == 1
        assert "仅支持" in result.output

    def test_bad_date_format(self, invoke: Callable[..., Result]) -> None:
        result = invoke("to-lunar", "2023/01/22")

        assert result.exit_code == 1
        assert "日期格式错误" in result.output

    def test_bad_timezone(self, invoke: Callable[..., Result]) -> None:
        result = invoke("to-lunar", "2023-01-22", "--tz", "Mars/Olympus")

        assert result.exit_code == 1
        assert "无法识别时区" in result.output


@pytest.mark.integration
class TestToSolar:
    """测试 to-solar 命令。"""

    def test_ordinary_month(self, invoke: Callable[..., Result]) -> None:
        result = invoke("to-solar", "2023", "1", "1")

        assert result.exit_code == 0, result.output
        assert "2023-01-22" in result.output
        assert "Asia/Shanghai" in result.output

    def test_leap_month(self, invoke: Callable[..., Result]) -> None:
        result = invoke("to-solar", "2023", "2", "1", "--leap")

        assert result.exit_code == 0, result.output
        assert "2023-03-22" in result.output

    def test_explicit_timezone(self, invoke: Callable[..., Result]) -> None:
        result = invoke("to-solar", "2024", "1", "1", "--tz", "UTC")

        assert result.exit_code == 0, result.output
        assert "2024-02-10" in result.output
        assert "UTC" in result.output

    def test_invalid_leap_month(self, invoke: Callable[..., Result]) -> None:
        result = invoke("to-solar", "2024", "1", "1", "--leap")

        assert result.exit_code == 1
        assert "闰" in result.output


@pytest.mark.integration
class TestYearAndMonth:
    """测试 year / month 命令。"""

    def test_year_table(self, invoke: Callable[..., Result]) -> None:
        result = invoke("year", "2023")

        assert result.exit_code == 0, result.output
        assert "闰二月" in result.output
        assert "2023-03-22" in result.output
        assert "384" in result.output

    def test_year_out_of_range(self, invoke: Callable[..., Result]) -> None:
        result = invoke("year", "2100")
        assert result.exit_code == 1

    def test_month_table(self, invoke: Callable[..., Result]) -> None:
        result = invoke("month", "2024-02")

        assert result.exit_code == 0, result.output
        assert "2024-02-29" in result.output
        assert "除夕" in result.output
        assert "春节" in result.output

    def test_month_partially_out_of_range(self, invoke: Callable[..., Result]) -> None:
        """测试超出支持范围的日期显示占位符，整月仍正常输出。"""
        result = invoke("month", "1900-01")

        assert result.exit_code == 0, result.output
        assert "1900-01-01" in result.output
        assert "1900-01-31" in result.output
        assert "正月初一" in result.output
        assert " - " in result.output


@pytest.mark.integration
class TestEnvFile:
    """测试 --env-file 与默认 .env 搜索的隔离。"""

    def test_env_file_option(self, invoke: Callable[..., Result], tmp_path: Path) -> None:
        """测试 --env-file 指定的配置生效。"""
        custom = _write_env(
            tmp_path / "custom.env",
            {"LUNARCAL_TZ": "UTC", "LUNARCAL_LOG_LEVEL": "INFO", "LUNARCAL_DATE_FORMAT": "%d/%m/%Y"},
        )

        result = invoke("to-lunar", "22/01/2023", env_path=custom)
        assert result.exit_code == 0, result.output
        assert "22/01/2023" in result.output
        assert "正月初一" in result.output

        result = invoke("to-solar", "2024", "1", "1", env_path=custom)
        assert result.exit_code == 0, result.output
        assert "10/02/2024" in result.output
        assert "UTC" in result.output

    def test_stray_dotenv_in_cwd_ignored(
        self,
        invoke: Callable[..., Result],
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """测试当前目录下的 .env 不影响指定了 --env-file 的命令。"""
        workdir = tmp_path / "work"
        (workdir / ".lunarcal").mkdir(parents=True)
        stray = {"LUNARCAL_TZ": "UTC", "LUNARCAL_DATE_FORMAT": "%d/%m/%Y"}
        _write_env(workdir / ".env", stray)
        _write_env(workdir / ".lunarcal" / ".env", stray)
        monkeypatch.chdir(workdir)

        result = invoke("to-solar", "2023", "1", "1")

        assert result.exit_code == 0, result.output
        assert "2023-01-22" in result.output
        assert "Asia/Shanghai" in result.output

"""
Command-line entry point tests — arguments, output and exit codes.

Run: pytest tests/ -v
"""

from __future__ import annotations

import pytest

from main import build_parser, main, options_from_args
from numwords.models import DecimalSeparatorStyle, Gender, OutputFormat


class TestOptionsFromArgs:
    def test_defaults(self) -> None:
        options = options_from_args(build_parser().parse_args(["1"]))
        assert options.currency is False
        assert options.format == OutputFormat.STANDARD
        assert options.decimal_separator is None

    def test_currency_without_code(self) -> None:
        options = options_from_args(build_parser().parse_args(["1", "--currency"]))
        assert options.currency is True
        assert options.currency_code is None

    def test_currency_with_code(self) -> None:
        options = options_from_args(build_parser().parse_args(["1", "--currency", "gbp"]))
        assert options.currency_code == "GBP"

    def test_flags(self) -> None:
        args = build_parser().parse_args(["1", "--year", "--era", "--comma", "--gender", "feminine", "--and"])
        options = options_from_args(args)
        assert options.format == OutputFormat.YEAR
        assert options.include_era_suffix is True
        assert options.decimal_separator == DecimalSeparatorStyle.COMMA
        assert options.gender == Gender.FEMININE
        assert options.include_conjunction is True

    @pytest.mark.parametrize("code", ["XY", "DOLLARS", "12A"])
    def test_bad_currency_code_is_a_usage_error(self, code: str) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["1", "--currency", code])

    def test_year_and_currency_are_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["1", "--year", "--currency"])


class TestMain:
    def test_converts_values(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["1234", "-5"]) == 0
        out = capsys.readouterr().out
        assert "one thousand two hundred thirty-four" in out
        assert "minus five" in out

    def test_other_locale(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["2.50", "--lang", "ru", "--currency"]) == 0
        assert "два рубля пятьдесят копеек" in capsys.readouterr().out

    def test_year(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["1984", "--year", "--era"]) == 0
        assert "nineteen eighty-four AD" in capsys.readouterr().out

    def test_fallback_exits_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["12", "abc"]) == 1
        out = capsys.readouterr().out
        assert "twelve" in out
        assert "INVALID_NUMBER" in out

    def test_unknown_locale_exits_2(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["1", "--lang", "xx"]) == 2
        assert "UNKNOWN_LOCALE" in capsys.readouterr().err

    def test_list_locales(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--list-locales"]) == 0
        out = capsys.readouterr().out
        assert "he" in out
        assert "CNY" in out

    def test_unknown_log_level_is_a_usage_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NUMWORDS_LOG_LEVEL", "LOUD")
        with pytest.raises(SystemExit) as exc_info:
            main(["1"])
        assert exc_info.value.code == 2

    def test_log_level_is_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NUMWORDS_LOG_LEVEL", "info")
        assert main(["1"]) == 0

    def test_no_values_is_a_usage_error(self) -> None:
        with pytest.raises(SystemExit):
            main([])

import logging

import click
import pytest

from detabase import ConfigError, Options
from detabase.logging_config import setup_logging
from detabase.utils import build_options, error_json, parse_json, parse_value


class TestBuildOptions:
    def test_complete(self) -> None:
        options = build_options("proj", "base", "key")

        assert options == Options(project_id="proj", base_name="base", api_key="key")
        assert options.base_url == "https://database.deta.sh/v1/proj/base/"

    @pytest.mark.parametrize(
        ("values", "missing"),
        [
            ((None, "base", "key"), "--project-id"),
            (("proj", "", "key"), "--base-name"),
            (("proj", "base", None), "--api-key"),
        ],
    )
    def test_missing_value(self, values: tuple[str | None, ...], missing: str) -> None:
        with pytest.raises(ConfigError, match=missing):
            build_options(*values)


class TestParsing:
    def test_parse_json(self) -> None:
        assert parse_json('{"a": [1, null]}', "ARG") == {"a": [1, None]}

    def test_parse_json_invalid(self) -> None:
        with pytest.raises(click.BadParameter, match="invalid JSON"):
            parse_json("{", "ARG")

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("hello", "hello"), ('"hello"', "hello"), ("3", 3), ("true", True), ("null", None)],
    )
    def test_parse_value(self, raw: str, expected: object) -> None:
        assert parse_value(raw) == expected

    def test_error_json(self) -> None:
        assert error_json("boom", "retry", 3) == {"error": "boom", "solution": "retry", "exit_code": 3}


class TestSetupLogging:
    @pytest.mark.parametrize(
        ("verbose", "level"),
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (3, logging.DEBUG)],
    )
    def test_levels(self, verbose: int, level: int) -> None:
        setup_logging(verbose)

        assert logging.getLogger().level == level

    def test_trace_opens_library_loggers(self) -> None:
        setup_logging(2)
        assert logging.getLogger("httpx").level == logging.WARNING

        setup_logging(3)
        assert logging.getLogger("httpx").level == logging.DEBUG

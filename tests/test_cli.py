"""Tests for uni_finder.cli module."""

from __future__ import annotations

import argparse
import io
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests
from rich.console import Console

from uni_finder.cli import cmd_search, main


def _response(payload) -> MagicMock:
    resp = MagicMock()
    resp.status_code = 200
    resp.json.return_value = payload
    return resp


def _args(country: str, **overrides) -> argparse.Namespace:
    fields = dict(
        country=country,
        state=None,
        category="all",
        timeout=None,
        log_level="WARNING",
        config=None,
    )
    fields.update(overrides)
    return argparse.Namespace(**fields)


@pytest.fixture()
def console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text("logging:\n  level: WARNING\n")
    return path


def _out(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


# ======================================================================
# Test: main dispatch
# ======================================================================


class TestMain:
    @patch("uni_finder.interactive.interactive_menu", return_value=0)
    def test_no_command_launches_menu(self, mock_menu: MagicMock) -> None:
        assert main([]) == 0
        mock_menu.assert_called_once_with(config_path=None)

    @patch("uni_finder.interactive.interactive_menu", return_value=0)
    def test_menu_command_passes_config(self, mock_menu: MagicMock, config_file: Path) -> None:
        assert main(["--config", str(config_file), "menu"]) == 0
        mock_menu.assert_called_once_with(config_path=config_file)

    @patch("uni_finder.cli.cmd_search", return_value=0)
    def test_search_command_parses_args(self, mock_search: MagicMock) -> None:
        main(["search", "India", "--state", "Delhi", "--type", "public"])
        args = mock_search.call_args.args[0]
        assert args.country == "India"
        assert args.state == "Delhi"
        assert args.category == "public"

    def test_rejects_unknown_type(self) -> None:
        with pytest.raises(SystemExit):
            main(["search", "India", "--type", "secret"])


# ======================================================================
# Test: search command
# ======================================================================


class TestCmdSearch:
    @patch("requests.Session.get")
    def test_success(self, mock_get: MagicMock, console: Console, config_file: Path, india_payload) -> None:
        mock_get.return_value = _response(india_payload)

        code = cmd_search(_args("India", config=config_file), console=console)

        assert code == 0
        out = _out(console)
        assert "Found 4 universities in India!" in out
        assert "Delhi Technological University" in out
        _, kwargs = mock_get.call_args
        assert kwargs["params"] == {"country": "India"}
        assert kwargs["timeout"] == 10.0

    @patch("requests.Session.get")
    def test_filters_applied(self, mock_get: MagicMock, console: Console, config_file: Path, india_payload) -> None:
        mock_get.return_value = _response(india_payload)

        code = cmd_search(
            _args("India", state="Gujarat", category="public", config=config_file),
            console=console,
        )

        assert code == 0
        out = _out(console)
        assert "Showing 1 of 4 universities" in out
        assert "Gujarat National Law University" in out
        assert "Delhi Technological University" not in out

    @patch("requests.Session.get")
    def test_unknown_state_lists_facets(
        self, mock_get: MagicMock, console: Console, config_file: Path, india_payload
    ) -> None:
        mock_get.return_value = _response(india_payload)

        code = cmd_search(_args("India", state="Goa", config=config_file), console=console)

        assert code == 2
        out = _out(console)
        assert "All States/Provinces (2 available)" in out
        assert "- Delhi" in out

    @patch("requests.Session.get")
    def test_state_matches_facet_ignoring_case(
        self, mock_get: MagicMock, console: Console, config_file: Path, india_payload
    ) -> None:
        mock_get.return_value = _response(india_payload)

        code = cmd_search(_args("India", state=" delhi ", config=config_file), console=console)

        assert code == 0
        out = _out(console)
        assert "Showing 1 of 4 universities" in out
        assert "Delhi Technological University" in out

    @patch("requests.Session.get")
    def test_not_found(self, mock_get: MagicMock, console: Console, config_file: Path) -> None:
        mock_get.return_value = _response([])

        code = cmd_search(_args("Atlantis", config=config_file), console=console)

        assert code == 1
        assert 'No universities found for "Atlantis"' in _out(console)
        assert mock_get.call_count == 2

    @patch("requests.Session.get")
    def test_network_failure(self, mock_get: MagicMock, console: Console, config_file: Path) -> None:
        mock_get.side_effect = requests.ConnectionError("offline")

        code = cmd_search(_args("India", config=config_file), console=console)

        assert code == 1
        assert "check your internet connection" in _out(console)

    @patch("requests.Session.get")
    def test_blank_country(self, mock_get: MagicMock, console: Console, config_file: Path) -> None:
        code = cmd_search(_args("   ", config=config_file), console=console)

        assert code == 1
        assert "Please enter a country name" in _out(console)
        mock_get.assert_not_called()

    @patch("requests.Session.get")
    def test_timeout_flag(self, mock_get: MagicMock, console: Console, config_file: Path, india_payload) -> None:
        mock_get.return_value = _response(india_payload)

        cmd_search(_args("India", timeout=2.5, config=config_file), console=console)

        _, kwargs = mock_get.call_args
        assert kwargs["timeout"] == 2.5

"""
Tests for the command line interface.
"""
import functools

import httpx
import pytest
from typer.testing import CliRunner

from vacuum import cli
from vacuum.errors import DateFormatError
from vacuum.etl import LaunchETL
from vacuum.render import Palette


runner = CliRunner()


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setattr(cli, "palette_for", lambda console: Palette())


@pytest.fixture
def fetched(monkeypatch, payload, launch_dict):
    """Replace the network fetch, recording requested URLs."""
    urls = []
    data = payload(launch_dict(name="First"), launch_dict(name="Second"))

    def extract(self, url):
        urls.append(url)
        return data

    monkeypatch.setattr(LaunchETL, "extract", extract)
    return urls


def test_about():
    result = runner.invoke(cli.app, ["about"])

    assert result.exit_code == 0
    assert result.output.startswith("Vacuum - a spaceflight event CLI\n\nCredits:\n")
    assert "https://launchlibrary.net/ - spaceflight database" in result.output


def test_launch_defaults_to_one(fetched):
    result = runner.invoke(cli.app, ["launch"])

    assert result.exit_code == 0
    assert fetched == ["https://launchlibrary.net/1.4/launch/next/1"]


def test_launch_compact(fetched):
    result = runner.invoke(cli.app, ["launch", "-n", "2"])

    assert result.exit_code == 0
    assert fetched == ["https://launchlibrary.net/1.4/launch/next/2"]
    assert "Launch First\n" in result.output
    assert "Launch Second\n" in result.output
    assert "Rocket:" not in result.output
    # Blocks are separated by a blank line
    assert "\n\nLaunch Second\n" in result.output


def test_launch_extended(fetched):
    result = runner.invoke(cli.app, ["launch", "-v"])

    assert result.exit_code == 0
    assert "Rocket: Falcon 9 Full Thrust\n" in result.output
    assert "1) [Communications] " in result.output


def test_launch_rejects_zero(fetched):
    result = runner.invoke(cli.app, ["launch", "-n", "0"])
    assert result.exit_code != 0
    assert fetched == []


def test_launch_lookup_failure(monkeypatch):
    def extract(self, url):
        raise httpx.ConnectError("unreachable")

    monkeypatch.setattr(LaunchETL, "extract", extract)
    result = runner.invoke(cli.app, ["launch"])

    assert result.exit_code == 1
    assert "Failed to lookup" in result.output


def test_launch_parse_failure(monkeypatch):
    def transform(self, raw_data):
        raise DateFormatError("bad", "launches[0].isonet")

    monkeypatch.setattr(LaunchETL, "extract", lambda self, url: {})
    monkeypatch.setattr(LaunchETL, "transform", transform)
    result = runner.invoke(cli.app, ["launch"])

    assert result.exit_code == 1
    assert "Failed to parse" in result.output


def test_launch_body_not_json(monkeypatch):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))
    monkeypatch.setattr(cli, "LaunchETL", functools.partial(LaunchETL, transport=transport))

    result = runner.invoke(cli.app, ["launch"])

    assert result.exit_code == 1
    assert "Failed to parse" in result.output
    assert "invalid JSON body" in result.output


def test_verbose_logs_lookup_url(fetched, monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "console")
    result = runner.invoke(cli.app, ["-v", "launch", "-n", "3"])

    assert result.exit_code == 0
    assert "lookup" in result.output
    assert "https://launchlibrary.net/1.4/launch/next/3" in result.output
    assert "launch options" not in result.output


def test_very_verbose_logs_options(fetched, monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "console")
    result = runner.invoke(cli.app, ["-vv", "launch", "-n", "3", "-v"])

    assert result.exit_code == 0
    assert "launch options" in result.output
    assert "number=3" in result.output
    assert "extended=True" in result.output


def test_quiet_by_default(fetched, monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    result = runner.invoke(cli.app, ["launch"])

    assert result.exit_code == 0
    assert "lookup" not in result.output

"""Tests for CLI commands."""

import json
from pathlib import Path
from unittest.mock import patch

import httpx
import respx

from gateway.cli import main


def _config(tmp_path: Path, api_key: str = "") -> str:
    path = tmp_path / "test.yaml"
    path.write_text(
        f"cwa_api_key: '{api_key}'\n"
        "upstream:\n"
        "  base_url: https://test-cwa.example.com/api\n"
    )
    return str(path)


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        result = main([])
        assert result == 1

    def test_locations(self, tmp_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        result = main(["--config", _config(tmp_path), "locations"])
        assert result == 0
        out = capsys.readouterr().out
        assert "kaohsiung\t高雄市" in out
        assert len(out.strip().splitlines()) == 4

    def test_config_masks_key(self, tmp_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        result = main(["--config", _config(tmp_path, "secret"), "config"])
        assert result == 0
        out = capsys.readouterr().out
        assert "secret" not in out
        assert json.loads(out)["cwa_api_key"] == "***"

    @respx.mock
    def test_forecast(self, tmp_path: Path, capsys, monkeypatch, kaohsiung_payload: dict):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        respx.get(
            "https://test-cwa.example.com/api/v1/rest/datastore/F-C0032-001"
        ).mock(return_value=httpx.Response(200, json=kaohsiung_payload))

        result = main(["--config", _config(tmp_path, "k"), "forecast", "kaohsiung"])
        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["city"] == "高雄市"
        assert len(data["forecasts"]) == 3

    def test_forecast_unknown_location(self, tmp_path: Path, capsys, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        result = main(["--config", _config(tmp_path, "k"), "forecast", "tokyo"])
        assert result == 1
        err = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert "kaohsiung" in err["supported_locations"]

    def test_serve_uses_config_port(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("CWA_API_KEY", raising=False)
        monkeypatch.setenv("PORT", "4321")
        with patch("uvicorn.run") as run:
            result = main(["--config", _config(tmp_path), "serve"])
        assert result == 0
        assert run.call_args.kwargs["port"] == 4321
        assert run.call_args.kwargs["host"] == "0.0.0.0"

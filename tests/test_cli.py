"""Tests for the CLI launcher."""

import json
from unittest.mock import patch

import pytest

from block_snake.cli import _build_parser, _load_config, main, simulate
from block_snake.config import GameConfig


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_serve_defaults(self):
        args = _build_parser().parse_args(["serve"])
        assert args.command == "serve"
        assert args.host == "127.0.0.1"
        assert args.port == 8000
        assert args.config is None
        assert args.rows is None

    def test_simulate_flags(self):
        args = _build_parser().parse_args([
            "simulate",
            "--rows", "8",
            "--tick-ms", "50",
            "--keys", "ArrowUp,ArrowLeft",
            "--max-ticks", "10",
        ])
        assert args.rows == 8
        assert args.tick_ms == 50
        assert args.keys == "ArrowUp,ArrowLeft"
        assert args.max_ticks == 10


class TestLoadConfig:
    def test_flags_override_file(self, tmp_path):
        path = tmp_path / "config.json"
        GameConfig(rows=9, cols=9, seed=3).save(path)
        args = _build_parser().parse_args([
            "serve", "--config", str(path), "--cols", "12", "--tick-ms", "90",
        ])
        cfg = _load_config(args)
        assert cfg.rows == 9
        assert cfg.cols == 12
        assert cfg.tick_period_ms == 90
        assert cfg.seed == 3

    def test_defaults_without_flags(self):
        args = _build_parser().parse_args(["serve"])
        assert _load_config(args) == GameConfig()


class TestSimulate:
    @pytest.mark.asyncio
    async def test_runs_into_top_wall(self):
        result = await simulate(GameConfig(seed=0), ["ArrowUp"], max_ticks=50)
        assert result["ticks"] == 3
        assert result["state"] == "halted"
        assert result["cause"] == "Wall Collision!"
        assert result["length"] >= 1

    @pytest.mark.asyncio
    async def test_no_keys_never_starts(self):
        result = await simulate(GameConfig(seed=0), [], max_ticks=5)
        assert result["ticks"] == 0
        assert result["state"] == "idle"
        assert result["cause"] is None

    @pytest.mark.asyncio
    async def test_tick_limit(self):
        keys = ["ArrowUp", "ArrowLeft", "a", "ArrowDown"]
        result = await simulate(GameConfig(seed=0), keys, max_ticks=4)
        assert result["ticks"] == 4
        assert result["state"] == "running"

    def test_main_prints_outcome(self, capsys):
        code = main(["simulate", "--keys", "ArrowUp", "--seed", "0"])
        assert code == 0
        out = capsys.readouterr().out
        assert "ticks=3" in out
        assert "cause=Wall Collision!" in out


class TestServe:
    def test_serve_runs_uvicorn(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"rows": 7, "cols": 7}))
        with patch("uvicorn.run") as run:
            code = main(["serve", "--config", str(path), "--port", "9001"])
        assert code == 0
        app = run.call_args.args[0]
        assert app.state.config.rows == 7
        assert run.call_args.kwargs["port"] == 9001

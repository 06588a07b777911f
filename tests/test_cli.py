# -*- coding: utf-8 -*-
"""
Forex Arbitrage CLI 테스트

- -i/-o 동시 지정 → 설정 오류, I/O 없음
- 파일 로드 모드 / 네트워크 수집 + 저장 모드
- 오류 시 exit code 1
"""

import json
from unittest import mock

import pytest

from forex_arbitrage import cli
from forex_arbitrage.exceptions import ConfigurationError
from forex_arbitrage.marketdata import StaticRateSource
from forex_arbitrage.storage import DEFAULT_FILE_SUFFIX


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_input_and_output_conflict_performs_no_io(workdir, capsys):
    with mock.patch.object(cli, "ExchangeRateRestSource") as rest_cls, \
            mock.patch.object(cli, "load_graph") as load, \
            mock.patch.object(cli, "save_graph") as save, \
            mock.patch.object(cli, "load_config") as config:
        exit_code = cli.main(["-i", "graph.json", "-o", "out.json"])

    assert exit_code == 1
    rest_cls.assert_not_called()
    load.assert_not_called()
    save.assert_not_called()
    config.assert_not_called()
    assert "--input" in capsys.readouterr().err
    assert list(workdir.iterdir()) == []


def test_verify_args_raises_configuration_error():
    args = cli.build_parser().parse_args(["--input", "a.json", "--output", "b.json"])

    with pytest.raises(ConfigurationError):
        cli.verify_args(args)


def test_load_mode_reports_opportunity(workdir, triangle_graph, capsys):
    (workdir / "graph.json").write_text(json.dumps(triangle_graph), encoding="utf-8")

    with mock.patch.object(cli, "ExchangeRateRestSource") as rest_cls:
        exit_code = cli.main(["-i", "graph.json"])

    assert exit_code == 0
    rest_cls.assert_not_called()
    out = capsys.readouterr().out
    assert "arbitrage opportunities detected:" in out
    assert "A -> B -> C -> A (gain: x1.03" in out
    # 로드한 그래프는 다시 저장하지 않음
    assert [p.name for p in workdir.iterdir()] == ["graph.json"]


def test_load_mode_without_opportunities(workdir, efficient_graph, capsys):
    (workdir / "graph.json").write_text(json.dumps(efficient_graph), encoding="utf-8")

    assert cli.main(["--input", "graph.json"]) == 0
    assert "no arbitrage opportunities detected" in capsys.readouterr().out


def test_fetch_mode_saves_default_file(workdir, closed_universe):
    source = StaticRateSource(closed_universe)

    with mock.patch.object(cli, "ExchangeRateRestSource", return_value=source):
        exit_code = cli.main([])

    assert exit_code == 0
    assert source.calls[0] == "USD"
    saved = [p for p in workdir.iterdir() if p.name.endswith(DEFAULT_FILE_SUFFIX)]
    assert len(saved) == 1
    assert set(json.loads(saved[0].read_text(encoding="utf-8"))) == {"USD", "EUR", "GBP", "KRW"}


def test_fetch_mode_saves_named_file_with_base(workdir, closed_universe):
    source = StaticRateSource(closed_universe)

    with mock.patch.object(cli, "ExchangeRateRestSource", return_value=source):
        exit_code = cli.main(["-o", "snapshot.json", "--base", "chf"])

    assert exit_code == 0
    assert source.calls[0] == "CHF"
    saved = json.loads((workdir / "snapshot.json").read_text(encoding="utf-8"))
    assert saved == closed_universe


def test_fetch_error_exits_non_zero(workdir, capsys):
    source = StaticRateSource({"USD": {"EUR": 0.91}})

    with mock.patch.object(cli, "ExchangeRateRestSource", return_value=source):
        exit_code = cli.main(["-o", "snapshot.json"])

    assert exit_code == 1
    assert not (workdir / "snapshot.json").exists()
    assert "EUR" in capsys.readouterr().err


def test_malformed_graph_file_exits_non_zero(workdir, capsys):
    (workdir / "graph.json").write_text("not json", encoding="utf-8")

    assert cli.main(["-i", "graph.json"]) == 1
    assert "error:" in capsys.readouterr().err


def test_non_positive_rate_exits_non_zero(workdir):
    (workdir / "graph.json").write_text(
        json.dumps({"USD": {"EUR": 0.0}, "EUR": {"USD": 1.1}}), encoding="utf-8"
    )

    assert cli.main(["-i", "graph.json"]) == 1


def test_conflict_message_printed_once(workdir, capsys):
    assert cli.main(["-i", "graph.json", "-o", "out.json"]) == 1

    err = capsys.readouterr().err
    assert err.count("--input") == 1
    assert err.startswith("error:")


@pytest.mark.parametrize(
    "text",
    [
        "rate_source:\n  timeout_seconds: fast\n",
        "logging:\n  level: 10\n",
    ],
)
def test_malformed_config_exits_non_zero(workdir, triangle_graph, text, capsys):
    (workdir / "bad.yml").write_text(text, encoding="utf-8")
    (workdir / "graph.json").write_text(json.dumps(triangle_graph), encoding="utf-8")

    assert cli.main(["--config", "bad.yml", "-i", "graph.json"]) == 1
    assert "error:" in capsys.readouterr().err


def test_critical_log_level_and_base_normalized(workdir, closed_universe):
    source = StaticRateSource(closed_universe)

    with mock.patch.object(cli, "ExchangeRateRestSource", return_value=source):
        exit_code = cli.main(["--log-level", "CRITICAL", "--base", " krw ", "-o", "g.json"])

    assert exit_code == 0
    assert source.calls[0] == "KRW"


def test_env_base_currency_normalized(workdir, closed_universe, monkeypatch):
    monkeypatch.setenv("FOREX_ARB_BASE_CURRENCY", "eur")
    source = StaticRateSource(closed_universe)

    with mock.patch.object(cli, "ExchangeRateRestSource", return_value=source):
        assert cli.main(["-o", "g.json"]) == 0

    assert source.calls[0] == "EUR"

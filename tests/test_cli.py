from __future__ import annotations

import sys

import pytest
from loguru import logger

from cnnumeral.cli import main


@pytest.fixture(autouse=True)
def _restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_cli_number(capsys):
    assert main(["number", "10000800", "0.01"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["壹仟万零捌佰", "零点零壹"]


def test_cli_currency_with_empty_format(capsys):
    assert main(["currency", "1.01", "", "--empty-format=N/A"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["壹元零壹分", "N/A"]


def test_cli_reports_failures_with_exit_code(capsys):
    assert main(["number", "12x", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["数据错误", "壹"]


def test_cli_money_commands(capsys):
    assert main(["fen2yuan", "2000"]) == 0
    assert main(["yuan2fen", "10.0201"]) == 0
    assert capsys.readouterr().out.splitlines() == ["20.00", "1002"]


def test_cli_fen2yuan_cut_zero(capsys):
    assert main(["fen2yuan", "2000", "2010", "--cut-zero"]) == 0
    assert capsys.readouterr().out.splitlines() == ["20", "20.1"]


def test_cli_verbose_logs_rejections(capsys):
    assert main(["-v", "currency", "1000000000000"]) == 1
    captured = capsys.readouterr()
    assert captured.out.strip() == "超大金额"
    assert "超大金额" in captured.err

"""Tests for the command-line entry point."""

import os

import main


def test_help_exits_cleanly(capsys):
    assert main.run_cli(['--help']) == 0
    assert 'Usage' in capsys.readouterr().out


def test_parse_args_defaults():
    source, block_size, threshold, rate, output = main.parse_args(['img.png'])
    assert source == 'img.png'
    assert (block_size, threshold, rate) == (8, 10.0, 4)
    assert output == 'reconstructed.png'


def test_synthetic_run_writes_output(tmp_path, capsys):
    out = str(tmp_path / 'out.png')
    assert main.run_cli(['--synthetic', '8', '5', '4', out]) == 0
    assert os.path.exists(out)
    assert 'PSNR' in capsys.readouterr().out


def test_bad_block_size_reports_error(tmp_path, capsys):
    out = str(tmp_path / 'out.png')
    assert main.run_cli(['--synthetic', '0', '5', '4', out]) == 1
    assert not os.path.exists(out)


def test_missing_file_reports_error(tmp_path):
    assert main.run_cli([str(tmp_path / 'missing.png')]) == 1

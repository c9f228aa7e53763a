import pytest

from smlkit.cli import main


def test_prints_given_values(capsys):
    assert main(["--alpha", "5", "-b"]) == 0
    out = capsys.readouterr().out
    assert "Argument: alpha, Value: 5\n" in out
    assert "Argument: beta, Value: true\n" in out
    assert "Usage:" not in out


def test_absent_options_print_null(capsys):
    main(["-c", "conf.toml"])
    out = capsys.readouterr().out
    assert "Argument: config, Value: conf.toml\n" in out
    assert "Argument: alpha, Value: (null)\n" in out


def test_no_arguments_prints_help(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Options:\n" in out
    assert "  -c, --config <value>\tConfig file path\n" in out


@pytest.mark.parametrize("word", ["--help", "-h"])
def test_help_flag_prints_help(capsys, word):
    main([word])
    assert "  -a, --alpha <value>\tAlpha parameter\n" in capsys.readouterr().out


def test_missing_value_reports_error(capsys):
    assert main(["--alpha"]) == 1
    captured = capsys.readouterr()
    assert "Value missing for option alpha" in captured.err
    assert captured.out == ""
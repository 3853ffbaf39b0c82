import logging

import pytest

from dnsprobe import __version__
from dnsprobe.cli import EXIT_OK, EXIT_OPTIONS_ERROR, _setup_logging, main
from dnsprobe.options import SILENT


def test_valid_options_exit_ok(scan_dir, captured_levels, capsys):
    assert main(["-l", "hosts.txt"]) == EXIT_OK
    assert captured_levels == [logging.INFO]
    assert "dnsprobe" not in capsys.readouterr().out


def test_banner_goes_to_stderr_unless_silent(scan_dir, captured_levels, capsys):
    main(["-l", "hosts.txt"])
    assert f"v{__version__}" in capsys.readouterr().err

    main(["-l", "hosts.txt", "-silent"])
    assert capsys.readouterr().err == ""


def test_version_prints_and_exits_ok(scan_dir, captured_levels, capsys):
    code = main(["-version", "-resp", "-resp-only"])

    assert code == EXIT_OK
    assert f"Current Version: {__version__}" in capsys.readouterr().out


def test_invalid_rcode_exits_with_error(scan_dir, captured_levels, caplog):
    caplog.set_level(logging.ERROR, logger="dnsprobe.cli")

    assert main(["-l", "hosts.txt", "-rcode", "bogus"]) == EXIT_OPTIONS_ERROR
    assert "invalid rcode value 'bogus'" in caplog.text


def test_oversized_rcode_exits_with_error(scan_dir, captured_levels, caplog):
    caplog.set_level(logging.ERROR, logger="dnsprobe.cli")

    assert main(["-l", "hosts.txt", "-rcode", "9" * 5000]) == EXIT_OPTIONS_ERROR
    assert "invalid rcode value" in caplog.text


def test_invalid_rcode_exits_before_version(scan_dir, captured_levels, capsys):
    assert main(["-version", "-rcode", "bogus"]) == EXIT_OPTIONS_ERROR
    assert "Current Version" not in capsys.readouterr().out


@pytest.mark.parametrize(
    ("argv", "message"),
    [
        (["-resp", "-resp-only"], "resp and resp-only"),
        (["-l", "hosts.txt", "-d", "example.com"], "list(l) flag can not be used"),
        (["-w", "words.txt"], "missing domain(d)"),
        (["-d", "example.com"], "missing wordlist(w)"),
        (["-d", "-", "-w", "-"], "stdin can be set for one flag"),
    ],
)
def test_input_rule_violations_exit_with_error(scan_dir, captured_levels, caplog, argv, message):
    caplog.set_level(logging.ERROR, logger="dnsprobe.cli")

    assert main(argv) == EXIT_OPTIONS_ERROR
    assert message in caplog.text


def test_malformed_resume_file_exits_with_error(scan_dir, captured_levels, caplog):
    (scan_dir / "resume.cfg").write_text("index: [broken\n", encoding="utf-8")
    caplog.set_level(logging.ERROR, logger="dnsprobe.cli")

    assert main(["-l", "hosts.txt", "-resume"]) == EXIT_OPTIONS_ERROR
    assert "could not load resume file" in caplog.text


def test_resume_logs_checkpoint(scan_dir, captured_levels, caplog):
    (scan_dir / "resume.cfg").write_text("resume_from: c.example.com\nindex: 5\n", encoding="utf-8")
    caplog.set_level(logging.INFO, logger="dnsprobe.cli")

    assert main(["-l", "hosts.txt", "-resume"]) == EXIT_OK
    assert "Resuming from c.example.com (index 5)" in caplog.text


def test_silent_level_wins_over_verbose(scan_dir, captured_levels):
    main(["-l", "hosts.txt", "-silent", "-v"])
    main(["-l", "hosts.txt", "-v"])
    assert captured_levels == [SILENT, logging.DEBUG]


def test_bad_integer_is_argparse_error(scan_dir, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-c", "many"])
    assert exc.value.code == 2
    assert "invalid int value" in capsys.readouterr().err


def test_help_lists_groups(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["-h"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    for group in ("Input", "Query", "Filters", "Rate-limit", "Output", "Debug", "Optimization", "Configurations"):
        assert f"{group}:" in out


def test_setup_logging_passes_level(monkeypatch):
    captured = []

    def _fake_basic_config(**kwargs):
        captured.append(kwargs.get("level"))

    monkeypatch.setattr(logging, "basicConfig", _fake_basic_config)

    _setup_logging(logging.DEBUG)
    _setup_logging(SILENT)
    assert captured == [logging.DEBUG, SILENT]


def test_invalid_resolver_exits_with_error(scan_dir, captured_levels, caplog):
    caplog.set_level(logging.ERROR, logger="dnsprobe.cli")

    assert main(["-l", "hosts.txt", "-r", "resolver.example.com"]) == EXIT_OPTIONS_ERROR
    assert "invalid resolver 'resolver.example.com'" in caplog.text

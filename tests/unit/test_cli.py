"""Tests for the command-line front end."""

from __future__ import annotations

import pytest

from conversorxml.cli.main import EXIT_FAILED, EXIT_OK, EXIT_USAGE, main
from tests.fakes import commission_xml, employee_xml, vale_xml


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CONVERSORXML_CLI_INPUT_DIR", str(tmp_path))
    monkeypatch.setenv("CONVERSORXML_CLI_PAUSE_ON_EXIT", "false")
    return tmp_path


def _answers(monkeypatch, *responses: str):
    queue = list(responses)

    def fake_input(prompt=""):
        if not queue:
            raise EOFError
        return queue.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)


class TestPathArgument:
    def test_converts_commission_file(self, workdir, capsys):
        (workdir / "comissao_jan2024.xml").write_bytes(
            commission_xml(employee_xml("111", "100.50", "10.00"), employee_xml("222", "200.00"))
        )
        assert main(["comissao_jan2024.xml"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Number of employees: 2" in out
        assert "Total commission: R$ 300.50" in out
        assert "Total bonus target: R$ 10.00" in out
        assert (workdir / "comissao_jan2024.csv").exists()

    def test_vale_summary(self, workdir, capsys):
        (workdir / "vales_fev.xml").write_bytes(vale_xml(employee_xml("1", "30")))
        assert main(["vales_fev.xml"]) == EXIT_OK
        assert "Total vales: R$ 30.00" in capsys.readouterr().out

    def test_unsupported_name_exits_nonzero(self, workdir, capsys):
        (workdir / "folha.xml").write_bytes(vale_xml(employee_xml("1", "30")))
        assert main(["folha.xml"]) == EXIT_FAILED
        assert "Error: Unsupported file type" in capsys.readouterr().out

    def test_no_employees_is_not_an_error(self, workdir, capsys):
        (workdir / "comissao_vazio.xml").write_bytes(commission_xml())
        assert main(["comissao_vazio.xml"]) == EXIT_OK
        assert "contains no employees" in capsys.readouterr().out
        assert not (workdir / "comissao_vazio.csv").exists()


class TestInteractive:
    def test_picks_numbered_file(self, workdir, monkeypatch, capsys):
        (workdir / "comissao_a.xml").write_bytes(commission_xml(employee_xml("1", "1")))
        (workdir / "vales_b.xml").write_bytes(vale_xml(employee_xml("2", "2")))
        _answers(monkeypatch, "2")
        assert main([]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Welcome to the XML to CSV converter!" in out
        assert "https://github.com/jorgebeserra/conversorxmlcsv" in out
        assert "1. comissao_a.xml" in out
        assert (workdir / "vales_b.csv").exists()
        assert not (workdir / "comissao_a.csv").exists()

    def test_enter_selects_first_file(self, workdir, monkeypatch):
        (workdir / "comissao_a.xml").write_bytes(commission_xml(employee_xml("1", "1")))
        _answers(monkeypatch, "")
        assert main([]) == EXIT_OK
        assert (workdir / "comissao_a.csv").exists()

    def test_invalid_choice_reprompts(self, workdir, monkeypatch, capsys):
        (workdir / "comissao_a.xml").write_bytes(commission_xml(employee_xml("1", "1")))
        _answers(monkeypatch, "7", "x", "1")
        assert main([]) == EXIT_OK
        assert "Please enter a number between 1 and 1." in capsys.readouterr().out

    def test_end_of_input_aborts(self, workdir, monkeypatch):
        (workdir / "comissao_a.xml").write_bytes(commission_xml(employee_xml("1", "1")))
        _answers(monkeypatch)
        assert main([]) == EXIT_USAGE

    def test_no_xml_files(self, workdir, capsys):
        assert main([]) == EXIT_OK
        assert "No XML files were found" in capsys.readouterr().out

    def test_failed_conversion_exit_code(self, workdir, monkeypatch):
        (workdir / "vales_x.xml").write_bytes(commission_xml(employee_xml("1", "1")))
        _answers(monkeypatch, "1")
        assert main([]) == EXIT_FAILED

    def test_pause_on_exit_waits_for_enter(self, workdir, monkeypatch, capsys):
        monkeypatch.setenv("CONVERSORXML_CLI_PAUSE_ON_EXIT", "true")
        monkeypatch.setenv("CONVERSORXML_CLI_SHOW_BANNER", "false")
        (workdir / "comissao_a.xml").write_bytes(commission_xml(employee_xml("1", "1")))
        prompts: list[str] = []

        def fake_input(prompt=""):
            prompts.append(prompt)
            return ""

        monkeypatch.setattr("builtins.input", fake_input)
        assert main([]) == EXIT_OK
        assert prompts[-1] == "Press Enter to exit..."
        assert "Welcome" not in capsys.readouterr().out


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert "conversorxml 0.1.0" in capsys.readouterr().out


def test_invalid_log_level_reports_error(workdir, monkeypatch, capsys):
    monkeypatch.setenv("CONVERSORXML_LOG_LEVEL", "verbose")
    assert main([]) == EXIT_USAGE
    assert "Error: Invalid configuration" in capsys.readouterr().out

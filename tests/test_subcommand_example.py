"""Tests for optscan.parser.subcommand_example."""

import pytest

from optscan.parser.subcommand_example import main


class TestSubcommandExample:
    def test_add_with_global_options(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["prog", "-v", "-R", "/repo", "add", "-n", "a.py", "b.py"]) == 0
        out = capsys.readouterr().out
        assert "Adding files: a.py, b.py" in out
        assert "Dry run: yes" in out
        assert "Repository: /repo" in out
        assert "Verbose: yes" in out

    def test_commit_alias_with_message(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["prog", "ci", "-m", "fix", "typo", "--", "a.py"]) == 0
        out = capsys.readouterr().out
        assert "Committing files: a.py" in out
        assert "Message: fix typo" in out
        assert "Repository: (default)" in out

    def test_commit_everything(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["prog", "commit"]) == 0
        assert "Committing all changes." in capsys.readouterr().out

    def test_subcommand_options_are_not_global(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["prog", "-n", "add", "a.py"]) == 2
        assert "no such option: -n" in capsys.readouterr().err

    def test_unknown_subcommand(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["prog", "push"]) == 1
        assert "unknown command: push" in capsys.readouterr().err

    def test_add_needs_files(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["prog", "add"]) == 2
        assert "need at least one file to add" in capsys.readouterr().err

    def test_repository_needs_path(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["prog", "--repository"]) == 2
        assert "requires a PATH" in capsys.readouterr().err

    @pytest.mark.parametrize("argv", [["prog", "--"], ["prog", "-v", "--"]])
    def test_end_marker_without_command(
        self, argv: list, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(argv) == 2
        assert "need a command" in capsys.readouterr().err

    def test_no_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["prog", "-v"]) == 0
        assert "(no command)" in capsys.readouterr().out

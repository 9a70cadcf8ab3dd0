"""
Tests for the minigrep CLI

Runs cli.main() end to end against real files in tmp_path.
"""
import pytest

from minigrep.cli import get_log_level, main, run

POEM = """\
Rust:
safe, fast, productive.
Pick three.
Trust me.
"""


@pytest.fixture
def poem(tmp_path):
    path = tmp_path / "poem.txt"
    path.write_text(POEM, encoding="utf-8")
    return str(path)


def no_env(name):
    return None


class TestMain:
    """Test CLI exit codes and output."""

    def test_one_match(self, poem, capsys):
        """Test a case-sensitive search prints the match and summary."""
        assert main(["duct", poem], env=no_env) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == [
            '"safe, fast, productive." at line 2',
            "has searched 1 lines matched",
        ]

    def test_insensitive_flag(self, poem, capsys):
        """Test -i finds every case variant."""
        assert main(["rUsT", poem, "-i"], env=no_env) == 0

        out = capsys.readouterr().out
        assert '"Rust:" at line 1' in out
        assert '"Trust me." at line 4' in out
        assert "has searched 2 lines matched" in out

    def test_env_default(self, poem, capsys):
        """Test CASE_INSENSITIVE switches the default."""
        env = {"CASE_INSENSITIVE": ""}.get
        assert main(["RUST", poem], env=env) == 0

        assert "has searched 2 lines matched" in capsys.readouterr().out

    def test_sensitive_flag_overrides_env(self, poem, capsys):
        """Test -s wins over CASE_INSENSITIVE."""
        env = {"CASE_INSENSITIVE": "1"}.get
        assert main(["RUST", poem, "-s"], env=env) == 0

        assert capsys.readouterr().out.strip() == "the file is empty"

    def test_no_matches(self, poem, capsys):
        """Test zero matches is still success."""
        assert main(["zzz", poem], env=no_env) == 0

        assert capsys.readouterr().out.strip() == "the file is empty"

    def test_missing_argument(self, capsys):
        """Test a missing filename fails with usage."""
        assert main(["hello"], env=no_env) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: didn't get a file name" in captured.err
        assert "usage:" in captured.err

    def test_invalid_flag(self, poem, capsys):
        """Test an invalid flag names the token."""
        assert main(["hello", poem, "-x"], env=no_env) == 1

        assert "-x" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        """Test an unreadable file fails without usage."""
        missing = str(tmp_path / "missing.txt")
        assert main(["hello", missing], env=no_env) == 1

        err = capsys.readouterr().err
        assert "Error: cannot read" in err
        assert "missing.txt" in err
        assert "usage:" not in err

    def test_reads_sys_argv(self, poem, capsys, monkeypatch):
        """Test argv defaults to sys.argv[1:]."""
        monkeypatch.setattr("sys.argv", ["minigrep", "Pick", poem])
        monkeypatch.delenv("CASE_INSENSITIVE", raising=False)

        assert main() == 0
        assert '"Pick three." at line 3' in capsys.readouterr().out


class TestRun:
    """Test the console script entry point."""

    def test_exit_zero_on_success(self, poem, capsys, monkeypatch):
        """Test a successful search exits 0."""
        monkeypatch.setattr("sys.argv", ["minigrep", "duct", poem])
        monkeypatch.delenv("CASE_INSENSITIVE", raising=False)

        with pytest.raises(SystemExit) as exc_info:
            run()

        assert exc_info.value.code == 0
        assert '"safe, fast, productive." at line 2' in capsys.readouterr().out

    def test_exit_one_on_missing_argument(self, capsys, monkeypatch):
        """Test a missing filename exits 1."""
        monkeypatch.setattr("sys.argv", ["minigrep", "hello"])

        with pytest.raises(SystemExit) as exc_info:
            run()

        assert exc_info.value.code == 1
        assert "didn't get a file name" in capsys.readouterr().err

    def test_invalid_log_level(self, poem, monkeypatch):
        """Test an unknown MINIGREP_LOG_LEVEL does not crash the run."""
        monkeypatch.setattr("sys.argv", ["minigrep", "duct", poem])
        monkeypatch.setenv("MINIGREP_LOG_LEVEL", "verbose")

        with pytest.raises(SystemExit) as exc_info:
            run()

        assert exc_info.value.code == 0


class TestGetLogLevel:
    """Test log level resolution from the environment."""

    def test_default(self, monkeypatch):
        """Test WARNING when unset."""
        monkeypatch.delenv("MINIGREP_LOG_LEVEL", raising=False)
        assert get_log_level() == "WARNING"

    def test_valid_name(self, monkeypatch):
        """Test a known level name is accepted in any case."""
        monkeypatch.setenv("MINIGREP_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"

    def test_unknown_name(self, monkeypatch):
        """Test an unknown level name falls back to WARNING."""
        monkeypatch.setenv("MINIGREP_LOG_LEVEL", "verbose")
        assert get_log_level() == "WARNING"

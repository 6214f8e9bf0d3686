import io
import os

import pytest

from minishell.builtins import (
    ShellExit,
    cd,
    digits_only,
    exit_builtin,
    home_path,
    is_numeric,
    pwd,
    strip_exit_argument,
    trim_path,
)


def _exit_status(args, env=()):
    with pytest.raises(ShellExit) as info:
        exit_builtin(args, list(env))
    return info.value.status


def test_trim_path_drops_leading_spaces():
    assert trim_path("   /tmp") == "/tmp"
    assert trim_path("/tmp  ") == "/tmp  "


def test_home_path_relative_and_absolute(monkeypatch):
    monkeypatch.setenv("HOME", "/home/user")
    assert home_path("~/docs", True) == "/home/user" + "/docs"
    assert home_path("~/docs", False) == "/home/user"


def test_home_path_without_home(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    assert home_path("~", True) is None


def test_cd_changes_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(os.getcwd())
    assert cd(["cd", str(tmp_path)]) == 0
    assert os.path.samefile(os.getcwd(), tmp_path)


def test_cd_with_leading_spaces(tmp_path, monkeypatch):
    monkeypatch.chdir(os.getcwd())
    assert cd(["cd", "  " + str(tmp_path)]) == 0
    assert os.path.samefile(os.getcwd(), tmp_path)


def test_cd_tilde_uses_home(tmp_path, monkeypatch):
    monkeypatch.chdir(os.getcwd())
    (tmp_path / "sub").mkdir()
    monkeypatch.setenv("HOME", str(tmp_path))
    assert cd(["cd", "~/sub"]) == 0
    assert os.path.samefile(os.getcwd(), tmp_path / "sub")


def test_cd_without_argument_is_an_error(capsys):
    assert cd(["cd"]) == 1
    assert "trop d'arguments" in capsys.readouterr().err


def test_cd_with_two_arguments_is_an_error(capsys, tmp_path):
    assert cd(["cd", str(tmp_path), str(tmp_path)]) == 1
    assert "trop d'arguments" in capsys.readouterr().err


def test_cd_pwd_reference_does_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert cd(["cd", "$PWD"]) == 0
    assert os.path.samefile(os.getcwd(), tmp_path)


def test_cd_missing_directory(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert cd(["cd", str(tmp_path / "missing")]) == 1
    assert "Aucun fichier ou dossier de ce nom" in capsys.readouterr().err
    assert os.path.samefile(os.getcwd(), tmp_path)


def test_pwd_writes_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    assert pwd(["pwd"], out) == 0
    assert out.getvalue() == os.getcwd() + "\n"


def test_pwd_without_args_fails():
    out = io.StringIO()
    assert pwd(None, out) == 1
    assert out.getvalue() == ""


@pytest.mark.parametrize("text", ["42", "+42", "-42", "+", "0"])
def test_is_numeric_accepts(text):
    assert is_numeric(text) is True


@pytest.mark.parametrize("text", ["", None, "4a", "abc", "1 2", "--1"])
def test_is_numeric_rejects(text):
    assert is_numeric(text) is False


def test_strip_exit_argument_removes_quotes():
    assert strip_exit_argument('"42"') == "42"
    assert strip_exit_argument("'7'") == "7"
    assert strip_exit_argument(None) is None


def test_strip_exit_argument_stops_at_space():
    assert strip_exit_argument("12 34") == "12"


def test_digits_only_keeps_digits():
    assert digits_only("a1b2c3") == "123"
    assert digits_only("xyz") == ""


def test_exit_without_args_uses_last_status():
    assert _exit_status(["exit"], ["PATH=/bin", "?=3"]) == 3


def test_exit_without_status_entry_is_zero():
    assert _exit_status(["exit"], ["PATH=/bin"]) == 0


def test_exit_none_is_zero():
    assert _exit_status(None) == 0


def test_exit_with_number():
    assert _exit_status(["exit", "7"]) == 7


def test_exit_status_is_truncated_to_a_byte():
    assert _exit_status(["exit", "-1"]) == 255
    assert _exit_status(["exit", "256"]) == 0


def test_exit_non_numeric(capsys):
    assert _exit_status(["exit", "abc"]) == 2
    assert "argument numérique nécessaire" in capsys.readouterr().err


def test_exit_too_many_arguments(capsys):
    assert _exit_status(["exit", "1", "2"]) == 1
    assert "trop d'arguments" in capsys.readouterr().err


def test_exit_plus_sign_takes_digits_of_next_argument():
    assert _exit_status(["exit", "+", "x5"]) == 5


def test_exit_minus_sign_with_extra_argument():
    assert _exit_status(["exit", "-", "5"]) == 156


def test_shell_exit_carries_status():
    error = ShellExit(42)
    assert error.status == 42
import io

from motormarket.cli import main, run
from motormarket.console import Console
from motormarket.users import Role, UserStore


def _run(tmp_path, text):
    out = io.StringIO()
    status = run(Console(io.StringIO(text), out), tmp_path)
    return status, out.getvalue()


def test_register_then_login_opens_menu(tmp_path):
    status, text = _run(tmp_path, "1 dana password buyer dana password 7\n")
    assert status == 0
    assert "registeration successful" in text
    assert "Welcome to buyer menu:" in text
    assert UserStore(tmp_path / "userinfo.txt").accounts() == [("dana", "password", "BUYER")]


def test_register_invalid_role(tmp_path):
    status, text = _run(tmp_path, "1 dana password guest\n")
    assert status == 1
    assert "please enter a valid role" in text
    assert not (tmp_path / "userinfo.txt").exists()


def test_register_then_failed_login(tmp_path):
    status, text = _run(tmp_path, "1 dana password seller dana wrong\n")
    assert status == 1
    assert text.endswith("login failed\n")


def test_login_existing_account(tmp_path):
    UserStore(tmp_path / "userinfo.txt").register("sam", "password", Role.SELLER)
    status, text = _run(tmp_path, "2 SELLER sam password 7\n")
    assert status == 0
    assert "login successful" in text
    assert "Welcome to seller menu:" in text


def test_login_unknown_account(tmp_path):
    status, text = _run(tmp_path, "2 ADMIN sam password\n")
    assert status == 1
    assert "login failed" in text


def test_invalid_option(tmp_path):
    status, _ = _run(tmp_path, "5\n")
    assert status == 1


def test_main_uses_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 dana password admin dana password 7\n"))
    assert main(["--directory", str(tmp_path)]) == 0
    assert "Welcome to admin menu:" in capsys.readouterr().out
    assert UserStore(tmp_path / "userinfo.txt").authenticate("dana", "password") is Role.ADMIN


def test_main_end_of_input(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 dana\n"))
    assert main(["--directory", str(tmp_path)]) == 1
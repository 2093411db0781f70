import pytest

from shelter import cli


def test_create_admin_arguments():
    args = cli.build_parser().parse_args(
        ["create-admin", "--email", "admin@cows-shelter.org", "--password", "secret123"]
    )
    assert args.command == "create-admin"
    assert args.email == "admin@cows-shelter.org"


def test_command_required():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_short_password_rejected(monkeypatch):
    calls = []

    async def fake_create_admin(email, password):
        calls.append(email)

    monkeypatch.setattr(cli, "create_admin", fake_create_admin)

    assert cli.main(["create-admin", "--email", "a@cows-shelter.org", "--password", "123"]) == 1
    assert calls == []


def test_create_admin_runs(monkeypatch):
    calls = []

    async def fake_create_admin(email, password):
        calls.append((email, password))

    monkeypatch.setattr(cli, "create_admin", fake_create_admin)

    assert cli.main(["create-admin", "--email", "a@cows-shelter.org", "--password", "secret123"]) == 0
    assert calls == [("a@cows-shelter.org", "secret123")]

"""End-to-end tests for the groupjoin CLI."""

import json
import re

from groupjoin import __version__
from groupjoin.entrypoints.cli import groupjoin

# pylint: disable=unused-argument


def _roles_json(runner, user_id: int) -> list[dict]:
    result = runner.invoke(groupjoin, ["roles", str(user_id), "--json"])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


def test_version(runner):
    """--version prints the package version."""
    result = runner.invoke(groupjoin, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_seed_assign_roles_flow(runner, db_url):
    """Seed two users and roles, assign one, and list user 1's roles."""
    assert runner.invoke(groupjoin, ["seed"]).exit_code == 0
    assert runner.invoke(groupjoin, ["assign", "1", "1"]).exit_code == 0
    assert runner.invoke(groupjoin, ["assign", "2", "2"]).exit_code == 0

    assert _roles_json(runner, 1) == [
        {"id": 1, "name": "Role 1", "user_roles": [{"user_id": 1, "role_id": 1}]},
        {"id": 2, "name": "Role 2", "user_roles": []},
    ]


def test_roles_table_output(runner, db_url):
    """Without --json a table with each role's link count is printed to stdout."""
    runner.invoke(groupjoin, ["seed"])
    runner.invoke(groupjoin, ["assign", "1", "2"])

    result = runner.invoke(groupjoin, ["--no-color", "roles", "1"])

    assert result.exit_code == 0, result.output
    assert "Role 1" in result.stdout
    assert "Role 2" in result.stdout
    assert re.search(r"Role 1\W+0\b", result.stdout)
    assert re.search(r"Role 2\W+1\b", result.stdout)


def test_seed_counts(runner, db_url):
    """--users/--roles control how many rows are seeded."""
    result = runner.invoke(groupjoin, ["seed", "--users", "1", "--roles", "3"])
    assert result.exit_code == 0, result.output
    assert [r["name"] for r in _roles_json(runner, 1)] == ["Role 1", "Role 2", "Role 3"]


def test_duplicate_assignment_fails(runner, db_url):
    """Assigning the same role twice is a usage error with a clear message."""
    runner.invoke(groupjoin, ["seed"])
    runner.invoke(groupjoin, ["assign", "1", "1"])

    result = runner.invoke(groupjoin, ["assign", "1", "1"])

    assert result.exit_code == 1
    assert "User 1 is already assigned role 1." in result.stderr


def test_assign_unknown_role_fails(runner, db_url):
    """Dangling ids are rejected."""
    runner.invoke(groupjoin, ["seed"])
    result = runner.invoke(groupjoin, ["assign", "1", "9"])
    assert result.exit_code == 1
    assert "Role 9 not found." in result.stderr


def test_reset_requires_confirmation(runner, db_url):
    """Declining the prompt keeps the data."""
    runner.invoke(groupjoin, ["seed"])

    result = runner.invoke(groupjoin, ["reset"], input="n\n")

    assert result.exit_code == 1
    assert len(_roles_json(runner, 1)) == 2


def test_reset_force_wipes_data(runner, db_url):
    """--force skips the prompt and deletes everything."""
    runner.invoke(groupjoin, ["seed"])
    result = runner.invoke(groupjoin, ["reset", "--force"])
    assert result.exit_code == 0, result.output
    assert _roles_json(runner, 1) == []


def test_missing_db_url(runner, monkeypatch):
    """Commands explain how to set GROUPJOIN_DB_URL."""
    monkeypatch.delenv("GROUPJOIN_DB_URL", raising=False)
    result = runner.invoke(groupjoin, ["roles", "1"])
    assert result.exit_code == 1
    assert "GROUPJOIN_DB_URL is not set" in result.stderr


def test_invalid_db_url(runner, monkeypatch):
    """Unparseable URLs are reported, not raised."""
    monkeypatch.setenv("GROUPJOIN_DB_URL", "not a url")
    result = runner.invoke(groupjoin, ["roles", "1"])
    assert result.exit_code == 1
    assert "not a valid database URL" in result.stderr


def test_flight_recorder_writes_log_on_force_flush(runner, db_url, tmp_path):
    """--force-flush dumps the buffered DEBUG records on exit."""
    result = runner.invoke(groupjoin, ["--force-flush", "seed"])
    assert result.exit_code == 0, result.output
    log = (tmp_path / "latest.log").read_text(encoding="utf-8")
    assert "Registered user 1" in log


def test_no_flight_recorder_writes_no_log(runner, db_url, tmp_path):
    """Disabling the recorder leaves no log file behind."""
    result = runner.invoke(groupjoin, ["--no-flight-recorder", "--force-flush", "seed"])
    assert result.exit_code == 0, result.output
    assert not (tmp_path / "latest.log").exists()


def test_help_lists_color_option(runner):
    """--color/--no-color comes with the group."""
    result = runner.invoke(groupjoin, ["--help"])
    assert result.exit_code == 0
    assert "--no-color" in result.output


def test_startup_line_names_backend(runner, db_url):
    """With -v the startup summary names the backend scheme."""
    result = runner.invoke(groupjoin, ["-v", "roles", "1"])
    assert result.exit_code == 0, result.output
    assert "backend=sqlite+pysqlite" in result.stderr


def test_rejected_assignment_lands_in_flight_recorder(runner, db_url, tmp_path):
    """A refused command is a WARNING, which writes the buffered log to disk."""
    runner.invoke(groupjoin, ["seed"])
    runner.invoke(groupjoin, ["assign", "1", "1"])

    result = runner.invoke(groupjoin, ["assign", "1", "1"])

    assert result.exit_code == 1
    log = (tmp_path / "latest.log").read_text(encoding="utf-8")
    assert "rejected: User 1 is already assigned role 1." in log
    assert "Handling AssignRole(user_id=1, role_id=1) with assign_role" in log

"""
Smoke tests for the terminal console, driven through click's CliRunner
"""

import logging

import pytest
from click.testing import CliRunner

from sentiment_board.db.seed import DEFAULT_SEED_PATH, load_seed_yaml, seed_all
from sentiment_board.main import run


@pytest.fixture
def run_console(container):
    runner = CliRunner()

    def _run(inputs, args=()):
        text = "".join(f"{line}\n" for line in inputs)
        result = runner.invoke(run, list(args), input=text, obj=container)
        assert result.exception is None or isinstance(result.exception, SystemExit), result.output
        return result

    return _run


@pytest.fixture
def seeded(container):
    seed_all(container.user_service, container.comment_service, load_seed_yaml(DEFAULT_SEED_PATH))
    return container


class TestMainMenu:
    """Top-level navigation"""

    def test_exit(self, run_console):
        """Choosing Exit ends the loop"""
        result = run_console(["4"])
        assert result.exit_code == 0
        assert "1. Register" in result.output

    def test_eof_ends_loop(self, run_console):
        """Closed stdin ends the loop without an abort"""
        result = run_console([])
        assert result.exit_code == 0
        assert "Aborted" not in result.output

    def test_invalid_choice_reprompts(self, run_console):
        """Out-of-range and non-numeric choices are refused by the prompt"""
        result = run_console(["9", "abc", "4"])
        assert result.exit_code == 0
        assert "9 is not in the range 1<=x<=4" in result.output
        assert "'abc' is not a valid integer" in result.output

    def test_seed_option(self, run_console, container):
        """--seed loads a YAML file before the menu"""
        result = run_console(["4"], args=["--seed", str(DEFAULT_SEED_PATH)])
        assert result.exit_code == 0
        assert container.user_service.count() == 2
        assert len(container.comment_service.list()) == 4

    def test_missing_seed_file(self, run_console):
        """An unknown seed path is a usage error"""
        result = run_console(["4"], args=["--seed", "nope.yaml"])
        assert result.exit_code == 2

    def test_builds_its_own_container(self):
        """Without obj the command wires settings, logging and stores itself"""
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            result = CliRunner().invoke(run, [], input="4\n")
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
        assert result.exit_code == 0
        assert "Pilih Menu" in result.output


class TestUserFlow:
    """Register, log in and comment"""

    def test_register_login_add_comment(self, run_console, container):
        """A new user can add a comment and see it listed"""
        inputs = [
            "1", "andi", "pw", "pw",
            "2", "andi", "pw",
            "3", "bagus sekali", "1",
            "1", "8", "4",
        ]
        output = run_console(inputs).output

        assert "User andi registered" in output
        assert "Welcome, andi" in output
        assert "Comment #1 added" in output
        assert any("bagus sekali" in line and "Positif" in line for line in output.splitlines())
        assert container.comment_service.list()[0].user_id == 1

    def test_register_confirmation_mismatch_reprompts(self, run_console, container):
        """A different confirmation asks for the password again"""
        output = run_console(["1", "andi", "a", "b", "pw", "pw", "4"]).output
        assert "do not match" in output
        assert "User andi registered" in output
        assert container.auth_service.sign_in("andi", "pw").username == "andi"

    def test_register_password_too_long(self, run_console, container):
        """Passwords over 72 bytes are refused with a message"""
        long_password = "x" * 73
        output = run_console(["1", "andi", long_password, long_password, "4"]).output
        assert "72 bytes" in output
        assert container.user_service.count() == 0

    def test_bad_login(self, run_console):
        """Wrong credentials print an error and return to the main menu"""
        output = run_console(["2", "ghost", "x", "4"]).output
        assert "Error: Invalid credentials" in output

    def test_cannot_delete_foreign_comment(self, run_console, seeded):
        """budi cannot delete andi's comment #1"""
        output = run_console(["2", "budi", "budi123", "5", "1", "8", "4"]).output
        assert any(line.startswith("Error: comment with ID 1 not found") for line in output.splitlines())
        assert seeded.comment_service.list()[0].id == 1

    def test_non_numeric_comment_id_reprompts(self, run_console, seeded):
        """The id prompt only accepts integers"""
        output = run_console(["2", "andi", "andi123", "5", "satu", "1", "8", "4"]).output
        assert "'satu' is not a valid integer" in output
        assert "Comment #1 deleted" in output


class TestAdminFlow:
    """Admin menu"""

    def test_wrong_admin_password(self, run_console):
        """A wrong ADMIN_PASS keeps the admin menu closed"""
        output = run_console(["3", "nope", "4"]).output
        assert "Error: Passwords do not match" in output

    def test_statistics(self, run_console, seeded):
        """Lihat Grafik shows per-category counts"""
        lines = run_console(["3", "secret", "3", "4", "4"]).output.splitlines()
        assert any(line.startswith("Positif") and " 1 " in line for line in lines)
        assert any(line.startswith("Netral") and " 2 " in line for line in lines)
        assert any(line.startswith("Total") and line.rstrip().endswith("4") for line in lines)

    def test_edit_user_by_number(self, run_console, seeded):
        """Displayed number 2 maps to storage position 1; empty password is kept"""
        old_hash = seeded.user_repo.get_at(1).password
        run_console(["3", "secret", "2", "3", "2", "budiman", "", "", "5", "4", "4"])
        user = seeded.user_repo.get_at(1)
        assert user.username == "budiman"
        assert user.password == old_hash

    def test_delete_comment_by_id(self, run_console, seeded):
        """Admin deletes any comment by id"""
        run_console(["3", "secret", "1", "4", "3", "6", "4", "4"])
        assert [c.id for c in seeded.comment_service.list()] == [1, 2, 4]

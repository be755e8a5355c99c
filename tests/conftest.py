"""Shared pytest fixtures for securebank tests."""

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import pytest

from securebank.config import BankConfig
from securebank.database.factories import create_file_database
from securebank.domain.account import AccountService
from securebank.domain.audit import AuditLog
from securebank.domain.credentials import CredentialService
from securebank.domain.prompts import Prompter


class ScriptedPrompter(Prompter):
    """Prompter that answers from a fixed script and records what was shown."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.notices: list[str] = []

    def feed(self, *answers: str) -> "ScriptedPrompter":
        self.answers.extend(answers)
        return self

    def ask(self, message: str, hide_input: bool = False) -> Optional[str]:
        self.prompts.append(message)
        if not self.answers:
            return None
        return self.answers.pop(0)

    def notify(self, message: str) -> None:
        self.notices.append(message)

    def reset(self) -> None:
        """Forget prompts and notices shown so far."""
        self.prompts.clear()
        self.notices.clear()


@pytest.fixture
def data_dir():
    """Create a temporary data directory for account files."""
    path = tempfile.mkdtemp(prefix="securebank-")

    yield Path(path)

    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def config(data_dir):
    """Store configuration pointing at the temporary data directory."""
    return BankConfig(data_dir=data_dir)


@pytest.fixture
def temp_db(config):
    """Create an initialized database in the temporary data directory."""
    db = create_file_database(config)
    db.initialize()

    yield db

    db.close()


@contextmanager
def open_database(config):
    """Open a fresh handle on the account files, e.g. after a CLI run."""
    with create_file_database(config) as db:
        yield db


@pytest.fixture
def prompter():
    """Scripted prompter with no answers queued."""
    return ScriptedPrompter()


@pytest.fixture
def audit_log(config):
    return AuditLog(config.audit_path)


@pytest.fixture
def credential_service(temp_db, prompter):
    """Create a CredentialService over the temporary database."""
    return CredentialService(temp_db, prompter)


@pytest.fixture
def account_service(temp_db, credential_service, audit_log):
    """Create an AccountService over the temporary database."""
    return AccountService(temp_db, credential_service, audit_log)


@pytest.fixture
def sample_account(account_service, prompter):
    """Account 5, Smith John, balance 100.00, PIN 4321."""
    prompter.feed("4321", "4321")
    record = account_service.create_account(5, "Smith John 100.00")
    prompter.reset()
    return record


@pytest.fixture
def audit_lines(config):
    """Return a callable reading the audit log lines written so far."""

    def read():
        if not config.audit_path.exists():
            return []
        return config.audit_path.read_text(encoding="utf-8").splitlines()

    return read


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()

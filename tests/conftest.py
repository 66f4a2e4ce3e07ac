# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the spam-detect test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from spam_detect.core import LabeledEmail
from spam_detect.spam import SpamClassifier


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def dataset_path(temp_dir):
    """Path for a dataset file that doesn't exist yet."""
    return temp_dir / "emails.csv"


@pytest.fixture
def classifier():
    """An untrained classifier with the default threshold."""
    return SpamClassifier()


@pytest.fixture
def sample_emails():
    """A small mix of spam and ham records."""
    return [
        LabeledEmail(label="spam", content="WIN a FREE cruise!!! Claim your prize"),
        LabeledEmail(label="ham", content="Lunch at noon?"),
        LabeledEmail(label="spam", content="  URGENT   lottery winner  "),
        LabeledEmail(label="Spam", content="Capitalised label counts as ham"),
        LabeledEmail(label="ham", content=""),
    ]


@pytest.fixture
def spam_message():
    """A message with four single-word spam indicators."""
    return "Congratulations WINNER! You WIN a free prize"

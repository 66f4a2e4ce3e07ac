# =============================================================================
# Training Dataset
# =============================================================================
# Reads and bootstraps the labeled CSV dataset.
#
# File format:
#   label,content
#   spam,Congratulations! You've won a free iPhone! ...
#   ham,Please find attached the quarterly report for your review.
#
# The first record is always treated as the header. Parsing is lenient:
#   - A missing label defaults to "ham"
#   - A missing content field defaults to ""
#   - Extra fields are ignored (an unquoted comma in the content simply
#     cuts the content short)
#   - Blank lines are not records
# Malformed quoting or undecodable bytes are errors, not lenient cases.
# =============================================================================

import csv
import logging
import sys
from pathlib import Path

from spam_detect.core import HAM, LabeledEmail

logger = logging.getLogger(__name__)


# Built-in sample written when the dataset file is missing: 10 spam, 10 ham
DEFAULT_DATASET = (
    "label,content\n"
    "spam,Congratulations! You've won a free iPhone! Click here to claim now!!!\n"
    "ham,Hi John, can we schedule a meeting to discuss the project next week?\n"
    "spam,URGENT: You've been selected for an exclusive lottery. Claim your $10,000 prize NOW!\n"
    "ham,Please find attached the quarterly report for your review.\n"
    "spam,GET RICH QUICK! Make $5000 per week working from home. No experience needed!\n"
    "ham,Meeting minutes from today's team discussion are attached.\n"
    "spam,Limited time offer! 90% OFF all products. Buy now before it's gone!\n"
    "ham,Could you please send me the updated client contact list?\n"
    "spam,You are the WINNER of our mega sweepstakes! Claim your prize immediately!\n"
    "ham,Thank you for your recent order. Your package will be shipped soon.\n"
    "spam,FREE VIAGRA! Lowest prices guaranteed. Buy now!\n"
    "ham,Please confirm your attendance for the upcoming conference.\n"
    "spam,Make millions from home! Our proven system guarantees success!!!\n"
    "ham,Your monthly bank statement is now available for review.\n"
    "spam,ATTENTION: Your computer is infected. Click here to fix immediately!\n"
    "ham,Draft proposal for the new marketing strategy is ready for your feedback.\n"
    "spam,Exclusive offer: Become a millionaire overnight! No investment required!\n"
    "ham,Reminder: Performance review meetings are scheduled for next week.\n"
    "spam,WIN BIG! Mega casino bonus waiting for you. No deposit needed!\n"
    "ham,Invoice #1234 for services rendered is attached for your records.\n"
)


# =============================================================================
# Exceptions
# =============================================================================

class DatasetError(Exception):
    """Base class for dataset failures. All of them are fatal at startup."""
    pass


class DatasetWriteError(DatasetError):
    """Raised when the default dataset cannot be written."""
    pass


class DatasetReadError(DatasetError):
    """Raised when the dataset file cannot be opened."""
    pass


class DatasetParseError(DatasetError):
    """Raised when the dataset is not valid CSV or not valid UTF-8."""
    pass


# =============================================================================
# Operations
# =============================================================================

def ensure_dataset(path: Path | str) -> bool:
    """
    Make sure a dataset exists at `path`, writing the built-in sample if not.

    An existing file is never touched, whatever it contains.

    Args:
        path: Location of the CSV dataset.

    Returns:
        True if the default dataset was created, False if a file was
        already there.

    Raises:
        DatasetWriteError: If the file cannot be written.
    """
    path = Path(path)
    if path.exists():
        logger.debug(f"Using existing dataset {path}")
        return False

    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(DEFAULT_DATASET)
    except OSError as e:
        raise DatasetWriteError(f"Could not create dataset {path}: {e}") from e

    print(f"Created default spam dataset: {path}")
    logger.info(f"Wrote default dataset to {path}")
    return True


def load_data(path: Path | str) -> list[LabeledEmail]:
    """
    Parse the CSV dataset into labeled emails, in file order.

    Args:
        path: Location of the CSV dataset.

    Returns:
        One LabeledEmail per data record (header excluded).

    Raises:
        DatasetReadError: If the file cannot be opened.
        DatasetParseError: If the file is not valid CSV or not UTF-8.
    """
    path = Path(path)
    emails: list[LabeledEmail] = []

    try:
        f = open(path, encoding="utf-8", newline="")
    except OSError as e:
        raise DatasetReadError(f"Could not open dataset {path}: {e}") from e

    with f:
        # Email bodies can exceed the csv module's default 128 KiB field cap
        csv.field_size_limit(sys.maxsize)
        reader = csv.reader(f, strict=True)
        try:
            header_seen = False
            for row in reader:
                if not row:
                    continue
                if not header_seen:
                    header_seen = True
                    continue
                emails.append(_row_to_email(row))
        except csv.Error as e:
            raise DatasetParseError(
                f"Invalid CSV in {path} at line {reader.line_num}: {e}"
            ) from e
        except UnicodeDecodeError as e:
            raise DatasetParseError(f"Dataset {path} is not valid UTF-8: {e}") from e

    logger.info(f"Loaded {len(emails)} emails from {path}")
    return emails


def _row_to_email(row: list[str]) -> LabeledEmail:
    """Build a LabeledEmail from a CSV row, defaulting missing fields."""
    label = row[0] if len(row) > 0 else HAM
    content = row[1] if len(row) > 1 else ""
    return LabeledEmail(label=label, content=content)

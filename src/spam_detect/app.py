# =============================================================================
# spam-detect Main Application
# =============================================================================
# Wires the pieces together and runs the interactive menu:
#
#   1. Load configuration (optional spam-detect.toml)
#   2. Make sure the dataset exists, writing the sample data if needed
#   3. Load the dataset and run the training pass
#   4. Loop: show the menu, check messages until the user picks Exit
#
# Every fatal error (dataset, config, closed stdin) is raised where it
# happens and caught once in main(), which prints it and returns a
# non-zero exit code.
# =============================================================================

import logging
import sys
from typing import TextIO

from spam_detect.config import Config, ConfigError
from spam_detect.spam import SpamClassifier
from spam_detect.storage import DatasetError, ensure_dataset, load_data

logger = logging.getLogger(__name__)


# Menu text
MENU_TITLE = "Spam Detection Tool"
MENU_OPTIONS = ("1. Check an email message", "2. Exit")
CHOICE_PROMPT = "Enter your choice (1/2): "
MESSAGE_PROMPT = "Enter the email message to check for spam: "

# Verdicts
SPAM_VERDICT = "🚨 SPAM DETECTED! This message appears to be spam."
HAM_VERDICT = "✅ NO SPAM DETECTED. This message seems safe."
INVALID_CHOICE = "Invalid choice. Please try again."


class InputError(Exception):
    """Raised when standard input is closed or can't be read."""
    pass


# =============================================================================
# Interactive Loop
# =============================================================================

def read_line(prompt: str, stdin: TextIO, stdout: TextIO) -> str:
    """
    Show a prompt and read one line, without its surrounding whitespace.

    Raises:
        InputError: On end of input or a read failure.
    """
    stdout.write(prompt)
    stdout.flush()

    try:
        line = stdin.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Could not read input: {e}") from e

    # readline() only returns "" at end of input; a blank line is "\n"
    if not line:
        raise InputError("Input closed")

    return line.strip()


def check_message(classifier: SpamClassifier, message: str) -> str:
    """Classify a message and return the verdict line to show."""
    return SPAM_VERDICT if classifier.predict(message) else HAM_VERDICT


def run_interactive(
    classifier: SpamClassifier,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """
    Run the menu loop until the user chooses Exit.

    Args:
        classifier: Trained (or untrained) classifier.
        stdin: Input stream. Defaults to sys.stdin.
        stdout: Output stream. Defaults to sys.stdout.

    Raises:
        InputError: If input ends before the user chooses Exit.
    """
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout

    while True:
        print(file=stdout)
        print(MENU_TITLE, file=stdout)
        for option in MENU_OPTIONS:
            print(option, file=stdout)

        choice = read_line(CHOICE_PROMPT, stdin, stdout)

        if choice == "1":
            message = read_line(MESSAGE_PROMPT, stdin, stdout)
            print(check_message(classifier, message), file=stdout)
        elif choice == "2":
            logger.debug("Exit selected")
            break
        else:
            print(INVALID_CHOICE, file=stdout)


# =============================================================================
# CLI Entry Point
# =============================================================================

def setup_logging(level: int = logging.WARNING) -> None:
    """Send log records to stderr so they don't mix with the menu."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)


def main() -> int:
    """
    Main entry point for spam-detect.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    setup_logging()

    try:
        config = Config.load()
        setup_logging(config.log.level_number)

        ensure_dataset(config.dataset.path)
        emails = load_data(config.dataset.path)

        classifier = SpamClassifier(threshold=config.classifier.threshold)
        classifier.train(emails)

        run_interactive(classifier)
    except (ConfigError, DatasetError, InputError) as e:
        logger.debug("Fatal error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())

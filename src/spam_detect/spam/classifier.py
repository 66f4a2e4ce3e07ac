# =============================================================================
# Keyword Spam Classifier
# =============================================================================
# A simple trigger-word spam classifier.
#
# How it works:
#   1. The message is lowercased and split on whitespace
#   2. Each token that exactly equals one of the SPAM_INDICATORS is counted
#   3. More than `threshold` matches (default 2) means spam
#
# Training accumulates every token of every dataset email into a spam or
# ham word list and counts the emails per class. These statistics are
# available through `stats` but classification does not use them.
#
# Note that "click here" and "limited offer" contain a space, so no token
# can ever equal them. They are kept in the indicator list as-is.
# =============================================================================

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from spam_detect.core import LabeledEmail
from spam_detect.spam.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


# Trigger words and phrases, in order
SPAM_INDICATORS: tuple[str, ...] = (
    "free",
    "win",
    "urgent",
    "lottery",
    "click here",
    "limited offer",
    "$$$",
    "winner",
    "prize",
    "congratulations",
)

# More than this many indicator tokens means spam
DEFAULT_THRESHOLD = 2


@dataclass
class ClassifierStats:
    """
    Statistics about the classifier.

    Attributes:
        spam_count: Number of spam emails trained on.
        ham_count: Number of ham (non-spam) emails trained on.
        spam_token_count: Total tokens collected from spam emails.
        ham_token_count: Total tokens collected from ham emails.
        vocabulary_size: Number of distinct tokens across both classes.
    """
    spam_count: int = 0
    ham_count: int = 0
    spam_token_count: int = 0
    ham_token_count: int = 0
    vocabulary_size: int = 0


class SpamClassifier:
    """
    Trigger-word spam classifier.

    Usage:
        >>> classifier = SpamClassifier()
        >>> classifier.train(emails)
        >>> classifier.predict("FREE prize for the WINNER")
        True

    Attributes:
        tokenizer: Tokenizer used for both training and prediction.
        threshold: A message is spam when its indicator count exceeds this.
        spam_words: Tokens collected from spam emails, in training order.
        ham_words: Tokens collected from ham emails, in training order.
        spam_count: Number of spam emails trained on.
        ham_count: Number of ham emails trained on.
    """

    def __init__(
        self,
        tokenizer: Tokenizer | None = None,
        threshold: int = DEFAULT_THRESHOLD,
    ) -> None:
        """
        Initialize the spam classifier.

        Args:
            tokenizer: Tokenizer instance. Creates default if None.
            threshold: Indicator count that must be exceeded for spam.
        """
        self.tokenizer = tokenizer or Tokenizer()
        self.threshold = threshold

        # Training data (never consulted by predict)
        self.spam_words: list[str] = []
        self.ham_words: list[str] = []
        self.spam_count = 0
        self.ham_count = 0

    @property
    def stats(self) -> ClassifierStats:
        """Get classifier statistics."""
        return ClassifierStats(
            spam_count=self.spam_count,
            ham_count=self.ham_count,
            spam_token_count=len(self.spam_words),
            ham_token_count=len(self.ham_words),
            vocabulary_size=len(set(self.spam_words) | set(self.ham_words)),
        )

    def train(self, emails: Iterable[LabeledEmail]) -> None:
        """
        Accumulate per-class tokens and counts from labeled emails.

        Only the exact label "spam" counts as spam; everything else is ham.

        Args:
            emails: Labeled emails, typically from load_data().
        """
        for email in emails:
            tokens = self.tokenizer.tokenize(email.content)

            if email.is_spam:
                self.spam_words.extend(tokens)
                self.spam_count += 1
            else:
                self.ham_words.extend(tokens)
                self.ham_count += 1

        stats = self.stats
        logger.info(
            f"Trained on {stats.spam_count} spam / {stats.ham_count} ham emails "
            f"({stats.vocabulary_size} distinct tokens)"
        )

    def count_indicators(self, message: str) -> int:
        """
        Count the tokens of `message` that are spam indicators.

        Every occurrence counts, so "free free free" scores 3.
        """
        return sum(
            1 for token in self.tokenizer.tokenize(message)
            if token in SPAM_INDICATORS
        )

    def predict(self, message: str) -> bool:
        """
        Decide whether a message is spam.

        Args:
            message: Message text.

        Returns:
            True if the message has more than `threshold` indicator tokens.
        """
        matches = self.count_indicators(message)
        logger.debug(f"{matches} spam indicator(s) in message")
        return matches > self.threshold

    def reset(self) -> None:
        """Reset the classifier to untrained state."""
        self.spam_words.clear()
        self.ham_words.clear()
        self.spam_count = 0
        self.ham_count = 0

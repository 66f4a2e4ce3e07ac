# =============================================================================
# Labeled Email Model
# =============================================================================
# A single training record: the label assigned to an email and its text.
#
# Labels are plain strings. Only the exact string "spam" counts as spam;
# every other value (including "Spam" or an empty string) is treated as ham.
# =============================================================================

from dataclasses import dataclass


# Known label values
SPAM = "spam"
HAM = "ham"


@dataclass(frozen=True)
class LabeledEmail:
    """
    An email read from the dataset, with its class label.

    Attributes:
        label: "spam" or "ham". Any other value is treated as ham.
        content: The message text.

    Example:
        >>> email = LabeledEmail(label="spam", content="FREE prize inside")
        >>> email.is_spam
        True
    """

    label: str = HAM
    content: str = ""

    @property
    def is_spam(self) -> bool:
        """True if this record is labeled spam (exact, case-sensitive)."""
        return self.label == SPAM

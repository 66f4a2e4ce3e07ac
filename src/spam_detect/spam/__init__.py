# =============================================================================
# Spam Module
# =============================================================================
# Keyword-based spam detection.
#
# The classifier flags a message as spam when it contains more than a
# handful of well-known trigger words ("free", "winner", "prize", ...).
# It also runs a training pass over the labeled dataset, but that only
# collects per-class word statistics; the verdict never depends on them.
# =============================================================================

from spam_detect.spam.classifier import SPAM_INDICATORS, ClassifierStats, SpamClassifier
from spam_detect.spam.tokenizer import Tokenizer

__all__ = ["SPAM_INDICATORS", "ClassifierStats", "SpamClassifier", "Tokenizer"]

# =============================================================================
# spam-detect Core Module
# =============================================================================
# Core domain models. Pure Python dataclasses with no external dependencies,
# so they can be imported anywhere without circular imports.
#
#   - LabeledEmail: One (label, content) record from the training dataset
# =============================================================================

from spam_detect.core.email import HAM, SPAM, LabeledEmail

__all__ = ["HAM", "SPAM", "LabeledEmail"]

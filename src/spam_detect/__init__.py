# =============================================================================
# spam-detect: A Keyword-Based Spam Checker
# =============================================================================
#
# spam-detect checks email messages for spam by counting well-known
# trigger words. It ships with a small labeled sample dataset and an
# interactive menu for checking messages one at a time.
#
# Features:
#   - Built-in 20 email sample dataset (written on first run)
#   - Lenient CSV dataset loading
#   - Trigger-word classification with a configurable threshold
#   - Optional TOML configuration
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "spam-detect"

# Main entry point - this is what gets called by the 'spam-detect' command
from spam_detect.app import main

__all__ = ["main", "__version__", "__app_name__"]

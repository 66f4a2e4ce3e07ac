# =============================================================================
# Storage Module
# =============================================================================
# Handles the on-disk training dataset.
#
# Provides:
#   - Creation of the built-in sample dataset when none exists
#   - CSV parsing into LabeledEmail records
#
# Nothing else is persisted: the classifier lives in memory only.
# =============================================================================

from spam_detect.storage.dataset import (
    DEFAULT_DATASET,
    DatasetError,
    DatasetParseError,
    DatasetReadError,
    DatasetWriteError,
    ensure_dataset,
    load_data,
)

__all__ = [
    "DEFAULT_DATASET",
    "DatasetError",
    "DatasetParseError",
    "DatasetReadError",
    "DatasetWriteError",
    "ensure_dataset",
    "load_data",
]

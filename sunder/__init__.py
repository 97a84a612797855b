"""Measure and classify the top-level folders of a home directory.

Library usage::

    >>> from sunder import run_smart_scan
    >>> result = run_smart_scan('/home/alice')
    >>> result.folders[0].name, result.folders[0].category
    ('node_modules', 'Package Caches')
"""
from .categories import CATEGORIES, classify_folder, group_by_category
from .models import CategorizedFolder, CategoryGroup, ChildFolder, ScanProgress, ScanResult
from .scanner import (
    SCAN_PROGRESS_EVENT, ScanCancelled, ScanError, dir_size, get_home_dir,
    run_smart_scan, smart_scan,
)

__version__ = "0.1.0"

__all__ = (
    "CATEGORIES", "SCAN_PROGRESS_EVENT",
    "CategorizedFolder", "CategoryGroup", "ChildFolder", "ScanProgress", "ScanResult",
    "ScanCancelled", "ScanError",
    "classify_folder", "dir_size", "get_home_dir", "group_by_category",
    "run_smart_scan", "smart_scan",
)

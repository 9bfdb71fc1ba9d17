"""Shared utilities for FlagIdentity package."""

from flagidentity.utils.dataloader import (
    data_search_dirs,
    find_data_file,
    load_csv_table,
    format_not_found_error,
)

__all__ = [
    # Data loading
    "data_search_dirs",
    "find_data_file",
    "load_csv_table",
    "format_not_found_error",
]

"""Shared data loading utilities for the country name tables.

This module provides the data file search used by the table loader: an
explicit directory, the module's own data/ directory and the development
tables/ directory.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import pandas as pd


def data_search_dirs(
    module_file: str,
    subdirectory: str,
    search_dev_tables: bool = True,
    module_local_data: bool = False,
    data_dir: Optional[Union[str, Path]] = None,
) -> List[Path]:
    """Directories searched for data files, highest priority first.

    Search priority:
    0. Explicit directory (if data_dir is given)
    1. Module-local data: {module_dir}/data/ (if module_local_data=True)
    2. Development data: {repo}/tables/{subdirectory}/ (if search_dev_tables=True)

    Args:
        module_file: __file__ from the calling module (e.g., __file__)
        subdirectory: Subdirectory name under tables/ (e.g., 'countries')
        search_dev_tables: Whether to search the tables/ directory for dev data
        module_local_data: Whether to search module_dir/data/
        data_dir: Optional directory searched before every other location

    Returns:
        List of directories; they need not exist
    """
    module_dir = Path(module_file).parent
    dirs = []
    if data_dir is not None:
        dirs.append(Path(data_dir))
    if module_local_data:
        dirs.append(module_dir / "data")
    if search_dev_tables:
        dirs.append(module_dir.parent.parent / "tables" / subdirectory)
    return dirs


def find_data_file(
    module_file: str,
    subdirectory: str,
    filenames: List[str],
    search_dev_tables: bool = True,
    module_local_data: bool = False,
    data_dir: Optional[Union[str, Path]] = None,
) -> Optional[Path]:
    """Find the first existing data file across data_search_dirs().

    Within a directory, earlier filenames win.

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> # From countries/countrytables.py (data is in countries/data/)
        >>> path = find_data_file(__file__, 'countries', ['countries.csv'],
        ...                       module_local_data=True)
    """
    dirs = data_search_dirs(
        module_file,
        subdirectory,
        search_dev_tables=search_dev_tables,
        module_local_data=module_local_data,
        data_dir=data_dir,
    )
    for d in dirs:
        for filename in filenames:
            p = d / filename
            if p.exists():
                return p
    return None


def load_csv_table(file_path: Path) -> pd.DataFrame:
    """Load a CSV table with every column read as text.

    Missing-value detection is disabled so that literal cells such as
    ``NA`` (Namibia) survive as strings. Empty cells load as ``""``.

    Args:
        file_path: Path to CSV file

    Returns:
        Loaded DataFrame

    Raises:
        ValueError: If file extension is not .csv
    """
    if file_path.suffix != ".csv":
        raise ValueError(f"Unsupported file format: {file_path.suffix}. Use .csv")

    df = pd.read_csv(file_path, dtype=str, keep_default_na=False, encoding="utf-8")
    return df.fillna("")


def format_not_found_error(
    filenames: Sequence[str],
    searched_locations: List[Tuple[str, Path]],
    fix_instructions: List[str],
) -> str:
    """Message for a FileNotFoundError raised when no table file exists.

    Examples:
        >>> print(format_not_found_error(
        ...     ["countries.csv"],
        ...     [("Package data", Path("countries/data"))],
        ...     ["Rebuild the tables"],
        ... ))
        Country table countries.csv not found.
        Searched:
          1. Package data: countries/data
        To fix:
          • Rebuild the tables
    """
    lines = [f"Country table {' or '.join(filenames)} not found."]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("To fix:")
    lines.extend(f"  • {instruction}" for instruction in fix_instructions)

    return "\n".join(lines)


__all__ = [
    "data_search_dirs",
    "find_data_file",
    "load_csv_table",
    "format_not_found_error",
]

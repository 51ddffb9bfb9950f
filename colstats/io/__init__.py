"""
CSV column loading.

Public API:
    load_column(path, has_header, column_index)  - one column as a read-only array
    load_columns(path, columns, has_header)       - several named columns as a DataSource

Format: comma-delimited text, optional single header line, one record per
line, no quoting. Columns are addressed by 0-based index.
"""

from colstats.io.reader import load_column, load_columns

__all__ = [
    "load_column",
    "load_columns",
]

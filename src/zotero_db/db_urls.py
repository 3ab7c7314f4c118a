from __future__ import annotations

from pathlib import Path
from urllib.parse import quote


def build_sqlite_uri(path: Path | str, *, read_only: bool) -> str:
    """Build the SQLite URI filename for a store file.

    - read_only=False: file:/abs/path/zotero.sqlite
    - read_only=True:  file:/abs/path/zotero.sqlite?mode=ro

    The URI goes to sqlite3 as-is (see db._create_engine), not through a
    SQLAlchemy URL, which would decode the escapes before SQLite sees them.
    '?', '#' and '%' in the path must stay percent-encoded here, otherwise
    SQLite reads them as query/fragment syntax and opens a different file.
    """
    abs_path = Path(path).expanduser().resolve().as_posix()
    uri = f"file:{quote(abs_path, safe='/')}"
    if read_only:
        uri += "?mode=ro"
    return uri

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, final

from pydantic_settings import BaseSettings, SettingsConfigDict


@final
class Settings(BaseSettings):
    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="ZOTERO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Explicit store file for the default library (ZOTERO_DB_PATH). Takes
    # precedence over data_dir when set.
    db_path: str = ""

    # Zotero data directory (ZOTERO_DATA_DIR); the store is <dir>/zotero.sqlite.
    data_dir: str = "~/Zotero"

    # Zotero keeps the store locked while running; read-only URI mode lets us
    # read it alongside the desktop client.
    read_only: bool = True
    sql_echo: bool = False

    # itemAttachments.path marker for files kept under <data dir>/storage/<key>/
    storage_prefix: str = "storage:"

    def default_store_path(self) -> Path:
        explicit = self.db_path.strip()
        if explicit:
            return Path(explicit).expanduser()
        return Path(self.data_dir).expanduser() / "zotero.sqlite"


settings = Settings()

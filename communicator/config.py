# communicator/config.py
import os
from typing import Optional

from pydantic import BaseModel


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    storage_connection_string: Optional[str] = None
    # Create the tables on startup. Turn it off where the tables are provisioned ahead of time.
    ensure_table_exists: bool = True
    app_id: str = ""
    app_password: str = ""
    app_tenant_id: Optional[str] = None
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Read the settings from the environment (call load_dotenv() first)."""
    return Settings(
        storage_connection_string=os.getenv("AZURE_STORAGE_CONNECTION_STRING"),
        ensure_table_exists=_env_flag("ENSURE_TABLE_EXISTS", True),
        app_id=os.getenv("MICROSOFT_APP_ID", ""),
        app_password=os.getenv("MICROSOFT_APP_PASSWORD", ""),
        app_tenant_id=os.getenv("MICROSOFT_APP_TENANT_ID") or None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )

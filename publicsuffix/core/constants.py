"""Application constants and paths for publicsuffix."""

import os
from pathlib import Path

# Application metadata
APP_NAME = "PublicSuffix"
APP_VERSION = "1.0.0"
CONFIG_VERSION = 1

# Base paths
_APPDATA = os.environ.get("APPDATA")
APPDATA_ROOT = Path(_APPDATA) / APP_NAME if _APPDATA else Path.home() / ".publicsuffix"
CONFIG_DIR = APPDATA_ROOT
LOGS_DIR = APPDATA_ROOT / "logs"

# File paths
CONFIG_FILE = CONFIG_DIR / "config.json"
DEBUG_LOG_FILE = LOGS_DIR / "debug.log"
AUDIT_LOG_FILE = LOGS_DIR / "audit.log"

# Logging settings
DEBUG_LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
DEBUG_LOG_BACKUP_COUNT = 3

# Rule source tokens
LIST_TOKEN_PRIVATE_DOMAINS = "===BEGIN PRIVATE DOMAINS==="
LIST_TOKEN_COMMENT = "//"

# Bundled list snapshot
PSL_FILE_NAME = "public_suffix_list.dat"
DEFAULT_LIST_VERSION = "publicsuffix.org snapshot (bundled excerpt)"

# Default settings
DEFAULT_SETTINGS = {
    "private_domains": True,
    "ignore_private": False,
    "list_path": None,
}

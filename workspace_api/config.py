from __future__ import annotations
import os
from pathlib import Path
from typing import Optional
from .exceptions import ApiAuthError

DEFAULT_BASE_URL = 'https://api.notion.com/v1'
# Service revision the request shapes were written against
API_VERSION = '2022-06-28'
DEFAULT_TIMEOUT = 30
DEFAULT_PAGE_SIZE = 100

API_KEY_ENV = 'NOTION_API_KEY'
BASE_URL_ENV = 'NOTION_API_BASE_URL'
TIMEOUT_ENV = 'NOTION_TIMEOUT'


def env(name: str, required: bool = True) -> Optional[str]:
    val = os.getenv(name)
    if required and (val is None or val.strip() == ''):
        raise ApiAuthError(f"Missing required environment variable: {name}")
    return val


def load_env_file(env_path: Path) -> None:
    """Load KEY=VALUE lines from a local .env file into os.environ.

    Existing non-empty variables are preserved. Blank lines, comments and
    lines without '=' are skipped; surrounding quotes are stripped.
    """
    if not env_path.exists():
        return
    for line in env_path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        if not k:
            continue
        existing = os.environ.get(k)
        if existing is None or existing.strip() == '':
            os.environ[k] = v

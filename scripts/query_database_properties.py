#!/usr/bin/env python
"""Print the properties (schema) of a Notion database.

Examples:
  python scripts/query_database_properties.py --database-id 0123abcd
  python scripts/query_database_properties.py --api-key secret_xxx --database-id 0123abcd --verbose

Options:
  --api-key (falls back to NOTION_API_KEY, also read from a local .env)
  --base-url (falls back to NOTION_API_BASE_URL)
  --verbose
"""
from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from workspace_api import ApiAuthError, ApiRequestError, WorkspaceClient, send_with_retries
from workspace_api import config


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description='Query Notion database properties')
    p.add_argument('--api-key', help=f'API key (default: ${config.API_KEY_ENV})')
    p.add_argument('--database-id', required=True)
    p.add_argument('--base-url', help=f'API base URL (default: ${config.BASE_URL_ENV} or {config.DEFAULT_BASE_URL})')
    p.add_argument('--verbose', action='store_true')
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    config.load_env_file(PROJECT_ROOT / '.env')
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format='[%(levelname)s] %(message)s')

    try:
        api_key = args.api_key or config.env(config.API_KEY_ENV)
    except ApiAuthError as e:
        print(f"[auth] {e}", file=sys.stderr)
        return 2
    base_url = args.base_url or os.getenv(config.BASE_URL_ENV) or None

    with WorkspaceClient(api_key, base_url=base_url) as client:  # type: ignore[arg-type]
        try:
            resp = send_with_retries(lambda: client.query_properties(args.database_id))
        except ApiAuthError as e:
            print(f"[auth] {e}", file=sys.stderr)
            return 2
        except ApiRequestError as e:
            print(f"[error] {e}", file=sys.stderr)
            return 1

    print(f"StatusCode : {resp.status_code}")
    try:
        content = json.dumps(resp.json(), ensure_ascii=False)
    except ValueError:
        content = resp.text
    print(f"Content    : {content}")
    return 0


if __name__ == '__main__':
    sys.exit(main())

"""
Pytest configuration and fixtures for honey-health tests.
"""

from __future__ import annotations

import logging
import os
import textwrap
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Generator

import pytest

from honeyhealth.config import reset_config


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_env() -> Generator[None, None, None]:
    """Hide HONEYHEALTH_* variables from the developer's shell and reset config."""
    original: Dict[str, str] = {
        k: v for k, v in os.environ.items() if k.startswith("HONEYHEALTH_")
    }
    for key in original:
        del os.environ[key]
    reset_config()

    yield

    reset_config()
    for key in [k for k in os.environ if k.startswith("HONEYHEALTH_")]:
        del os.environ[key]
    os.environ.update(original)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop handlers the CLI installs so later tests never write to a closed stream."""
    yield
    logger = logging.getLogger("honeyhealth")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


# ============================================================================
# Convention Model Fixtures
# ============================================================================


HTTP_YAML = textwrap.dedent("""\
    groups:
      - id: registry.http
        prefix: http
        type: attribute_group
        brief: HTTP attributes
        attributes:
          - id: method
            type: string
            brief: HTTP request method.
            stability: stable
""")

HTTP_REQUEST_YAML = textwrap.dedent("""\
    groups:
      - id: registry.http.request
        prefix: http.request
        attributes:
          - id: method
            brief: HTTP request method.
            type:
              allow_custom_values: true
              members:
                - id: get
                  value: GET
                - id: post
                  value: POST
          - id: header
            brief: HTTP request headers, the last segment is the header name.
            type: template[string[]]
          - id: body.size
            type: int
          - id: resend_count
            type: int
            deprecated: use http.request.resend_count_total
""")

DB_YAML = textwrap.dedent("""\
    groups:
      - id: registry.db
        prefix: db
        attributes:
          - id: system
            brief: Database management system.
            type:
              members:
                - id: postgresql
                  value: postgresql
                - id: mysql
                  value: mysql
          - id: statement
            type: string
          - ref: db.name
""")


@pytest.fixture
def model_dir(tmp_path: Path) -> Path:
    """A small convention model tree with nested directories."""
    root = tmp_path / "model"
    (root / "http").mkdir(parents=True)
    (root / "db").mkdir()
    (root / "http" / "http.yaml").write_text(HTTP_YAML)
    (root / "http" / "request.yml").write_text(HTTP_REQUEST_YAML)
    (root / "db" / "registry.yaml").write_text(DB_YAML)
    (root / "README.md").write_text("# not a convention document\n")
    return root


@pytest.fixture
def convention_yaml() -> Dict[str, str]:
    """Raw convention documents keyed by short name."""
    return {"http": HTTP_YAML, "http_request": HTTP_REQUEST_YAML, "db": DB_YAML}


# ============================================================================
# Column Export Fixtures
# ============================================================================


# Reports built from EXPORT_YAML use this as "now"
EXPORT_NOW = datetime(2024, 5, 10, tzinfo=timezone.utc)

EXPORT_YAML = textwrap.dedent("""\
    datasets:
      - slug: inventory
        last_written_at: 2024-05-08T00:00:00Z
        columns:
          - key_name: db.system
            type: string
            last_written: 2024-05-08T00:00:00Z
            values: [mysql]
          - key_name: db.statement
            type: string
      - slug: checkout
        last_written_at: 2024-05-09T12:00:00Z
        columns:
          - key_name: http.request.method
            type: string
            last_written: 2024-05-09T12:00:00Z
            values: [GET, PATCH]
          - key_name: db.system
            type: string
            values: [postgresql, mssql]
          - key_name: UserId
            type: integer
          - key_name: app.tier
            type: string
          - key_name: duration_ms
            type: float
          - key_name: stale.column
            type: string
            last_written: 2024-03-01T00:00:00Z
      - slug: archive
        last_written_at: 2024-01-01T00:00:00Z
        columns:
          - key_name: legacy.field
            type: string
""")


@pytest.fixture
def export_file(tmp_path: Path) -> Path:
    """A two-dataset column export plus one stale dataset."""
    path = tmp_path / "export.yaml"
    path.write_text(EXPORT_YAML)
    return path


@pytest.fixture
def export_now() -> datetime:
    return EXPORT_NOW

"""Shared pytest fixtures and configuration for the tdr test suite.

Guidelines
----------
* Storage always lives under ``tmp_path`` — never the real home directory.
* Core tests must be pure — no filesystem side effects.
* Tests must not depend on OS or username.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from tdr.infra.json_store import JsonTaskStore
from tdr.infra.paths import StorageConfig
from tdr.logging_setup import PACKAGE_LOGGER


@pytest.fixture()
def storage_config(tmp_path: Path) -> StorageConfig:
    """Config pointing at a not-yet-existing data directory."""
    return StorageConfig(data_dir=tmp_path / "tdr")


@pytest.fixture()
def store(storage_config: StorageConfig) -> JsonTaskStore:
    return JsonTaskStore(storage_config)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers bound to a previous test's captured stderr."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True

"""ipcnv - IPv4 address / 32-bit integer conversion tool."""
from __future__ import annotations

import pytest

from ipcnv.config import get_settings
from ipcnv.logging_config import setup_logging
from ipcnv.utils.endianness import get_host_byte_order


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    setup_logging("WARNING")
    yield


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for key in ("IPCNV_LOG_LEVEL", "IPCNV_OUTPUT_ENCODING", "IPCNV_APP_NAME"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_byte_order():
    get_host_byte_order.cache_clear()
    yield
    get_host_byte_order.cache_clear()

import logging
import os
from enum import Enum

from src.base.utils.env_utils import get_int_env

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:8080/api"
DEFAULT_MOCK_DELAY_MS = 300


class BackendMode(Enum):
    """Where the console's domain services send their calls."""

    API = "api"
    MOCK = "mock"


class BackendConfig:
    """Configuration for the external User Hub backend, read from the environment."""

    def __init__(self):
        self.api_base_url = os.getenv("USERHUB_API_BASE_URL", DEFAULT_API_BASE_URL)
        self.mode = self._read_mode()
        self.mock_delay_ms = get_int_env("USERHUB_MOCK_DELAY_MS", DEFAULT_MOCK_DELAY_MS)

    @staticmethod
    def _read_mode() -> BackendMode:
        raw = os.getenv("USERHUB_BACKEND", BackendMode.API.value).lower()
        try:
            return BackendMode(raw)
        except ValueError:
            raise RuntimeError(
                f"USERHUB_BACKEND must be one of "
                f"{[m.value for m in BackendMode]}, got {raw!r}"
            )

    @property
    def mock_delay_seconds(self) -> float:
        return max(self.mock_delay_ms, 0) / 1000

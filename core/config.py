# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# The server reads three environment variables:
#
#   OUTBOUND_CALL_API_URL   Base URL of the outbound-call API
#                           (default: http://localhost:8000)
#   PATIENT_DIRECTORY_PATH  Optional JSON file replacing the built-in
#                           patient directory
#   LOG_LEVEL               Diagnostic log level (default: INFO)
#
# main.py calls load_dotenv() first, so a .env file in the working directory
# works the same as exported variables.
# =============================================================================

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, read once at start-up."""

    api_url: str = DEFAULT_API_URL
    patient_directory_path: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read from.  Defaults to ``os.environ``.

    Blank values count as unset.  A trailing slash on the API URL is dropped
    so the endpoint path is never doubled.
    """
    env = os.environ if environ is None else environ

    api_url = (env.get("OUTBOUND_CALL_API_URL") or "").strip() or DEFAULT_API_URL
    directory_path = (env.get("PATIENT_DIRECTORY_PATH") or "").strip() or None
    log_level = (env.get("LOG_LEVEL") or "").strip().upper() or DEFAULT_LOG_LEVEL

    return Settings(
        api_url=api_url.rstrip("/"),
        patient_directory_path=directory_path,
        log_level=log_level,
    )

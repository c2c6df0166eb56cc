from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if present
load_dotenv()


@dataclass(frozen=True)
class Settings:
    cookie_path: str = os.getenv("IPA_CLIENT_COOKIE_PATH", "~/.ipa-client/cookies")
    log_level: str = os.getenv("IPA_CLIENT_LOG_LEVEL", "WARNING")
    max_redirects: int = int(os.getenv("IPA_CLIENT_MAX_REDIRECTS", "20"))


settings = Settings()

"""
Runtime settings, read from WORDBANK_* environment variables.
"""

import os
from dataclasses import dataclass


DEFAULT_STORAGE_KEY = "wordbank:word-bank-storage"


@dataclass
class Settings:
    redis_url: str = "redis://localhost:6379/0"
    data_source: str = "data/dictionary-chunks"  # directory or http(s) base URL
    cache_size: int = 5
    storage_key: str = DEFAULT_STORAGE_KEY
    log_level: str = "INFO"
    api_url: str = "http://localhost:8000/api"

    def __post_init__(self):
        if self.cache_size < 1:
            raise ValueError(f"cache_size must be >= 1, got {self.cache_size}")

    @classmethod
    def from_env(cls) -> "Settings":
        env = os.environ
        return cls(
            redis_url=env.get("WORDBANK_REDIS_URL", cls.redis_url),
            data_source=env.get("WORDBANK_DATA_SOURCE", cls.data_source),
            cache_size=int(env.get("WORDBANK_CACHE_SIZE", cls.cache_size)),
            storage_key=env.get("WORDBANK_STORAGE_KEY", cls.storage_key),
            log_level=env.get("WORDBANK_LOG_LEVEL", cls.log_level).upper(),
            api_url=env.get("WORDBANK_API_URL", cls.api_url),
        )

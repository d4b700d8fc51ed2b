"""
Runtime configuration, read from the environment (and a local ``.env``).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

class ConfigurationError(EnvironmentError):
    """Required settings are missing for the selected backend"""
    pass

BACKENDS = ("supabase", "memory")

@dataclass
class WorkspaceConfig:
    """Configuration for the market research workspace"""
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    table_name: str = "market_research"
    backend: str = "supabase"
    log_level: str = "INFO"

    def __post_init__(self):
        if self.backend not in BACKENDS:
            raise ConfigurationError(f"Unknown backend '{self.backend}', expected one of {BACKENDS}")

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "WorkspaceConfig":
        if load_dotenv_file:
            load_dotenv()
        return cls(
            supabase_url=os.getenv("SUPABASE_URL"),
            supabase_key=os.getenv("SUPABASE_KEY") or os.getenv("SUPABASE_ANON_KEY"),
            table_name=os.getenv("MARKET_RESEARCH_TABLE", "market_research"),
            backend=os.getenv("MARKET_RESEARCH_BACKEND", "supabase").strip().lower(),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

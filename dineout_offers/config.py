"""
Configuration for the Dineout Offer Finder.

Values come from the environment (or a local .env file):
    OFFERS_DATA_DIR              directory holding the CSV tables (default: data)
    OFFERS_MAX_SUGGESTIONS       dropdown cap per section (default: 50)
    OFFERS_SYNTHESIZE_UNMATCHED  build a pseudo-card for unmatched queries (default: false)
    OFFERS_LOG_LEVEL             logging level (default: INFO)
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from dineout_offers.query.suggestion_ranker import RankerOptions


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Application settings"""
    data_dir: Path = Path("data")
    max_suggestions: int = Field(default=50, ge=1)
    synthesize_unmatched: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Loads .env (if present) and reads OFFERS_* variables."""
        load_dotenv()
        return cls(
            data_dir=Path(os.getenv("OFFERS_DATA_DIR", "data")),
            max_suggestions=int(os.getenv("OFFERS_MAX_SUGGESTIONS", "50")),
            synthesize_unmatched=_env_flag("OFFERS_SYNTHESIZE_UNMATCHED"),
            log_level=os.getenv("OFFERS_LOG_LEVEL", "INFO").upper(),
        )

    def ranker_options(self) -> RankerOptions:
        return RankerOptions(
            limit=self.max_suggestions,
            synthesize_unmatched=self.synthesize_unmatched,
        )

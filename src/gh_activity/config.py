"""Runtime settings, read from the environment (and `.env`)."""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "GH_ACTIVITY_"


class Settings(BaseModel):
    """Knobs for a report run. Defaults reproduce the stock behaviour."""

    gh_binary: str = "gh"
    lookback_days: int = Field(default=7, ge=0)
    limit: int = Field(default=1000, gt=0)
    host: str = "github.com"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from GH_ACTIVITY_* variables; unset or empty ones keep defaults."""
        environ = os.environ if environ is None else environ
        values: dict[str, str] = {}
        for name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}", "").strip()
            if raw:
                values[name] = raw
        # GH_ACTIVITY_GH_BIN reads better than GH_ACTIVITY_GH_BINARY
        gh_bin = environ.get(f"{ENV_PREFIX}GH_BIN", "").strip()
        if gh_bin:
            values["gh_binary"] = gh_bin
        return cls.model_validate(values)

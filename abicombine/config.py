"""
Configuration for a combine pass.

Defaults reproduce the fixed facet list and Foundry output layout. An
optional JSON file can override any field; CLI options win over the file.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

DEFAULT_ARTIFACTS: List[str] = [
    "OwnershipFacet",
    "ProtocolFacet",
    "PositionManagerFacet",
    "VaultManagerFacet",
    "PriceOracleFacet",
    "LiquidationFacet",
]

DEFAULT_OUT_DIR = "out"
DEFAULT_OUTPUT = "CombinedABI.json"


class CombineConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    artifacts: List[str] = Field(default_factory=lambda: list(DEFAULT_ARTIFACTS))
    out_dir: Path = Path(DEFAULT_OUT_DIR)
    unit_extension: str = "sol"
    output: Path = Path(DEFAULT_OUTPUT)
    indent: int = Field(default=4, ge=0)


def load_config(config_path: Optional[Path] = None, **overrides: Any) -> CombineConfig:
    """Build a config from defaults, an optional JSON file, then overrides.

    Overrides set to None are ignored so CLI options left at their default
    do not clobber values from the file.
    """
    values: Dict[str, Any] = {}
    if config_path is not None:
        try:
            user = json.loads(config_path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigError(f"cannot read config {config_path}: {e.strerror or e}", config_path) from e
        except ValueError as e:
            raise ConfigError(f"invalid JSON in config {config_path}: {e}", config_path) from e
        if not isinstance(user, dict):
            raise ConfigError(f"config {config_path} must be a JSON object", config_path)
        # shallow merge is fine
        values.update(user)
    values.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return CombineConfig(**values)
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(p) for p in first.get("loc", ())) or "config"
        raise ConfigError(f"invalid config field '{loc}': {first.get('msg')}", config_path) from e

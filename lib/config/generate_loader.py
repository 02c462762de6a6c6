import os
from dataclasses import dataclass, field
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .yaml_loader import load_yaml_if_exists

DEFAULT_CONFIG_PATH = "config/generate.yaml"
CONFIG_ENV_VAR = "GENERATE_CONFIG"

JSON_ERROR_MESSAGE_FIELD = "message"
NO_SERVICE_ERROR: Dict[str, Any] = {
    "status_code": 503,
    "result": "FAIL",
    "message": "No protocol service has been started",
}


class GenerateSection(BaseModel):
    """Schema of the ``generate`` block; unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    error_field: str = JSON_ERROR_MESSAGE_FIELD
    no_service_error: Dict[str, Any] = Field(default_factory=lambda: dict(NO_SERVICE_ERROR))
    services: List[str] = Field(default_factory=list)


@dataclass
class GenerateConfig:
    """Typed view over ``generate.yaml``.

    ``raw`` keeps the whole parsed file, including sections this loader does
    not interpret.
    """

    raw: Dict[str, Any] = field(default_factory=dict)
    error_field: str = JSON_ERROR_MESSAGE_FIELD
    no_service_error: Dict[str, Any] = field(default_factory=lambda: dict(NO_SERVICE_ERROR))
    services: List[str] = field(default_factory=list)
    log_level: str = "INFO"


def resolve_config_path(path: str | None = None) -> str:
    return path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH


def load_generate_config(path: str | None = None) -> GenerateConfig:
    """Load ``generate.yaml`` and return a :class:`GenerateConfig`.

    Parameters
    ----------
    path:
        File system path to the YAML file.  Falls back to ``$GENERATE_CONFIG``
        and then to ``config/generate.yaml``; a missing file yields defaults.
    """

    raw = load_yaml_if_exists(resolve_config_path(path))
    section = GenerateSection.model_validate(raw.get("generate") or {})
    return GenerateConfig(
        raw=raw,
        error_field=section.error_field,
        no_service_error=section.no_service_error,
        services=section.services,
        log_level=str((raw.get("logging") or {}).get("level", "INFO")),
    )

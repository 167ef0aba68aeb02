from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class _BaseConfigModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class CategoryFileSettings(_BaseConfigModel):
    path: Optional[str] = None
    filename: str = "catver.ini"
    section: str = "Category"
    encoding: str = "utf-8"


class LoggingSettings(_BaseConfigModel):
    level: str = "INFO"
    log_dir: Optional[str] = None
    file_logging: bool = False
    structured_json: bool = False
    max_log_size: str = "10MB"
    backup_count: int = Field(default=3, ge=0)

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level: {value}")
        return level


class ConfigModel(_BaseConfigModel):
    category_file: CategoryFileSettings = Field(default_factory=CategoryFileSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


def validate_config(payload: Dict[str, Any], file_path: Optional[str] = None) -> ConfigModel:
    try:
        return ConfigModel.model_validate(payload)
    except PydanticValidationError as exc:
        first = exc.errors()[0] if exc.errors() else {}
        field_name = ".".join(str(part) for part in first.get("loc", ()))
        raise ValidationError(
            f"Invalid configuration: {exc.error_count()} error(s)",
            file_path=file_path,
            field_name=field_name or None,
            details={"errors": [err.get("msg") for err in exc.errors()]},
        ) from exc

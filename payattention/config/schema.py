from pydantic import BaseModel, field_validator
from typing import Literal
import re


class ExtensionConfig(BaseModel):
    CONFIG_VERSION: int = 1

    URGENT_STYLE_CLASS: str = "urgent"
    FOCUS_NEW_WINDOWS: bool = True

    LOG_LEVEL: Literal["INFO", "DEBUG", "WARN", "ERROR"] = "INFO"

    @field_validator("URGENT_STYLE_CLASS")
    @classmethod
    def validate_style_class(cls, v: str):
        if not re.fullmatch(r"[A-Za-z_][A-Za-z0-9_-]{0,63}", v or ""):
            raise ValueError("URGENT_STYLE_CLASS must be a single CSS class name")
        return v

    @property
    def log_level(self) -> str:
        # logging 모듈은 WARN 대신 WARNING
        return "WARNING" if self.LOG_LEVEL == "WARN" else self.LOG_LEVEL

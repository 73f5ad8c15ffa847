"""
Configuration settings for the API.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass, field
from typing import List


@dataclass
class Settings:
    """API Configuration"""

    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Paths left out of every directory scan, e.g. DEFAULT_EXCLUDE=vendor,var/cache
    DEFAULT_EXCLUDE: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is None:
                continue
            field_type = self.__dataclass_fields__[key].type
            if field_type == bool:
                setattr(self, key, env_value.lower() in ("true", "1", "yes"))
            elif field_type == List[str]:
                setattr(self, key, [v.strip() for v in env_value.split(",") if v.strip()])
            else:
                setattr(self, key, env_value)


# Global settings instance
settings = Settings()

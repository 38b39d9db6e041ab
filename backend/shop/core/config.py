"""
Application configuration settings
"""
from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Dict, Optional


# Seed inventories of the three server variants
VARIANT_INVENTORIES: Dict[int, Dict[str, int]] = {
    1: {"shoes": 10, "socks": 5},
    2: {"shoes": 10, "socks": 5},
    3: {"shoes": 50, "socks": 5},
}

# Variants 1 and 2 listen on every interface, variant 3 on loopback only
VARIANT_HOSTS: Dict[int, str] = {
    1: "0.0.0.0",
    2: "0.0.0.0",
    3: "localhost",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Shop Inventory"
    VARIANT: int = Field(3, ge=1, le=3)

    # Server
    HOST: Optional[str] = None
    PORT: int = 8080

    # Inventory seed (JSON object), per-variant default when unset
    INVENTORY: Optional[Dict[str, int]] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    model_config = {
        "env_prefix": "SHOP_",
        "env_file": ".env",
        "case_sensitive": True
    }

    def resolved_host(self, variant: Optional[int] = None) -> str:
        if self.HOST:
            return self.HOST
        return VARIANT_HOSTS[variant or self.VARIANT]

    def resolved_inventory(self, variant: Optional[int] = None) -> Dict[str, int]:
        if self.INVENTORY is not None:
            return dict(self.INVENTORY)
        return dict(VARIANT_INVENTORIES[variant or self.VARIANT])


# Global settings instance
settings = Settings()

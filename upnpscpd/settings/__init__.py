from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

UPNP_SERVICE_NAMESPACE = "urn:schemas-upnp-org:service-1-0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="UPNP_SCPD_")

    product: str = "upnp-scpd"
    version: str = "1"
    verify_ssl: bool = False
    service_namespace: str = UPNP_SERVICE_NAMESPACE
    log_level: str = "INFO"

    @property
    def user_agent(self) -> str:
        return f"{self.product}/{self.version} UPnP/1.0"


settings = Settings()

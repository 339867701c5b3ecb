from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "sizematch-search-api"
    DEBUG: bool = False

    # 쉼표로 구분된 엔진 주소 목록
    OPENSEARCH_HOSTS: str = "http://localhost:9200"
    OPENSEARCH_USERNAME: str = ""
    OPENSEARCH_PASSWORD: str = ""
    OPENSEARCH_VERIFY_CERTS: bool = False
    OPENSEARCH_TIMEOUT: float = 10.0

    ITEMS_INDEX: str = "items"
    ZERO_BOUND_IS_UNSET: bool = False

    CORS_ALLOW_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"
    LOG_AS_JSON: bool = True
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "/var/log/app"

    @property
    def opensearch_hosts(self) -> list[str]:
        return [h.strip() for h in self.OPENSEARCH_HOSTS.split(",") if h.strip()]

    @property
    def cors_allow_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]

settings = Settings()

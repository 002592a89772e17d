from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # "sqlite" or "memory"; chosen once at startup, no fallback.
    store_backend: str = "sqlite"
    database_path: str = "zaurnews.db"

    max_news_items: int = 100
    fetch_timeout: float = 10.0
    user_agent: str = "Mozilla/5.0 (compatible; ZaurNews/1.0)"
    summary_max_length: int = 300

    # Feed balancing
    per_source_cap: int = 2
    few_sources_cap: int = 3
    few_sources_threshold: int = 3
    dominant_source: str = "nature"

    # Minutes past the hour at which a discovery may fire (comma-separated)
    discovery_minutes: str = "10,25,40,55"
    recent_discovery_hours: int = 3
    discovery_retention_days: int = 30

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def discovery_minute_set(self) -> frozenset[int]:
        return frozenset(int(m) for m in self.discovery_minutes.split(",") if m.strip())


settings = Settings()

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


CATEGORY_INFO: dict[str, dict[str, str]] = {
    "jewelry": {"name": "Jewelry", "icon": "💎"},
    "experiences": {"name": "Experiences", "icon": "🎭"},
    "home": {"name": "Home & Living", "icon": "🏠"},
    "fashion": {"name": "Fashion", "icon": "👗"},
    "beauty": {"name": "Beauty & Wellness", "icon": "💄"},
    "tech": {"name": "Tech & Gadgets", "icon": "📱"},
    "unique": {"name": "Unique & Creative", "icon": "✨"},
    "books": {"name": "Books", "icon": "📚"},
    "sports": {"name": "Sports & Outdoors", "icon": "⚽"},
    "toys": {"name": "Toys & Games", "icon": "🧸"},
    "food": {"name": "Food & Gourmet", "icon": "🍫"},
    "art": {"name": "Art", "icon": "🎨"},
}
DEFAULT_CATEGORY_ICON = "🎁"

def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in (raw or "").split(",") if item.strip()]


class Settings(BaseSettings):
    database_url: str = Field("sqlite+aiosqlite:///./giftgenius.db", alias="DATABASE_URL")
    redis_url: Optional[str] = Field(None, alias="REDIS_URL")

    env: str = Field("dev", alias="ENV")
    debug: bool = Field(False, alias="DEBUG")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    app_version: str = Field("1.0.0", alias="APP_VERSION")

    cors_origins: str = Field("http://localhost:3000", alias="CORS_ORIGINS")
    cors_origin_regexes: str = Field(r"^https://.*\.vercel\.app$", alias="CORS_ORIGIN_REGEXES")

    gift_categories: str = Field(
        "jewelry,experiences,home,fashion,beauty,tech,unique,books,sports,toys,food,art",
        alias="GIFT_CATEGORIES",
    )
    default_page_limit: int = Field(20, alias="DEFAULT_PAGE_LIMIT")
    max_page_limit: int = Field(100, alias="MAX_PAGE_LIMIT")
    max_offset: int = Field(10000, alias="MAX_OFFSET")
    max_price: float = Field(100000, alias="MAX_PRICE")
    strict_query_validation: bool = Field(False, alias="STRICT_QUERY_VALIDATION")

    success_rate_strategy: str = Field("precomputed", alias="SUCCESS_RATE_STRATEGY")
    success_rate_refresh_seconds: int = Field(300, alias="SUCCESS_RATE_REFRESH_SECONDS")

    request_timeout_seconds: float = Field(5.0, alias="REQUEST_TIMEOUT_SECONDS")
    rate_limit_requests: int = Field(100, alias="RATE_LIMIT_REQUESTS")
    rate_limit_window_seconds: int = Field(900, alias="RATE_LIMIT_WINDOW_SECONDS")
    analytics_rate_limit_requests: int = Field(10, alias="ANALYTICS_RATE_LIMIT_REQUESTS")
    category_cache_ttl_seconds: int = Field(60, alias="CATEGORY_CACHE_TTL_SECONDS")

    seed_on_startup: bool = Field(True, alias="SEED_ON_STARTUP")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.env.lower() in {"prod", "production"} and not self.debug

    @property
    def category_allow_list(self) -> list[str]:
        return [c.lower() for c in _split_csv(self.gift_categories)]

    @property
    def cors_origin_list(self) -> list[str]:
        return _split_csv(self.cors_origins)

    @property
    def cors_origin_patterns(self) -> list[str]:
        return _split_csv(self.cors_origin_regexes)


@lru_cache()
def get_settings() -> Settings:
    return Settings()

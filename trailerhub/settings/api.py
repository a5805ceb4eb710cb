"""HTTP API settings: server, viewer tokens, operators and CORS."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def split_csv(raw: str) -> list[str]:
    """Non-empty, stripped items of a comma-separated value."""
    return [item.strip() for item in raw.split(",") if item.strip()]


class APISettings(BaseSettings):
    """Server and OpenAPI metadata.

    Attributes:
        public_url: Base URL the catalog pager uses to reach GET /api/v1/movies.
    """

    host: str = Field(default="0.0.0.0", alias="API_HOST")
    port: int = Field(default=8000, alias="API_PORT")
    reload: bool = Field(default=True, alias="API_RELOAD")
    public_url: str = Field(default="http://localhost:8000", alias="API_PUBLIC_URL")
    title: str = Field(default="TrailerHub API", alias="API_TITLE")
    version: str = Field(default="1.0.0", alias="API_VERSION")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class SecuritySettings(BaseSettings):
    """Viewer tokens, request budget and catalog operators.

    Attributes:
        jwt_secret_key: HMAC secret, at least 32 characters.
        rate_limit_per_minute: Request budget per client address.
        demo_users_raw: Built-in logins as "user:pass,user:pass".
        admin_users_raw: Usernames allowed to trigger the catalog refresh.
    """

    jwt_secret_key: str = Field(min_length=32, alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expire_minutes: int = Field(default=30, alias="JWT_EXPIRE_MINUTES")
    rate_limit_per_minute: int = Field(default=100, ge=1, alias="RATE_LIMIT_PER_MINUTE")
    demo_users_raw: str = Field(default="", alias="AUTH_DEMO_USERS")
    admin_users_raw: str = Field(default="", alias="ADMIN_USERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def demo_users(self) -> dict[str, str]:
        """Username to password; passwords may contain colons."""
        pairs = (entry.split(":", 1) for entry in split_csv(self.demo_users_raw) if ":" in entry)
        return {user.strip(): password.strip() for user, password in pairs}

    @property
    def admin_users(self) -> set[str]:
        return set(split_csv(self.admin_users_raw))


class CORSSettings(BaseSettings):
    """Browser origins allowed to call the API."""

    origins_raw: str = Field(default="http://localhost:3000", alias="CORS_ORIGINS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def origins(self) -> list[str]:
        return split_csv(self.origins_raw)

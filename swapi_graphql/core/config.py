from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if it exists
load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Backing REST catalog
    SWAPI_BASE_URL: str = Field(
        "https://swapi.dev/api", description="Root URL of the REST catalog"
    )
    SWAPI_TIMEOUT_SECONDS: float = Field(30.0, description="Per-request HTTP timeout")

    LOG_LEVEL: str = Field("INFO")

    # Allow CORS for any GraphiQL / frontend origin by default
    CORS_ALLOWED_ORIGINS: list[str] = Field(default=["*"])

    GRAPHIQL_ENABLED: bool = Field(True)

    # Rate limiting (slowapi limit string, e.g. "100/minute")
    RATE_LIMIT_ENABLED: bool = Field(True)
    RATE_LIMIT: str = Field("100/minute")

    # OpenTelemetry (Optional)
    OPENTELEMETRY_ENABLED: bool = Field(False)
    OTEL_EXPORTER_OTLP_ENDPOINT: str | None = Field(None)

    # Reject global IDs whose type tag does not match the by-ID field
    STRICT_GLOBAL_ID_TYPES: bool = Field(False)


settings = Settings()

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TYPE_BASE_URL = "https://httpstatuses.com/"


class Settings(BaseSettings):
    # Base of the problem type URI derived from a status code
    type_base_url: str = Field(default=DEFAULT_TYPE_BASE_URL, alias="PROBLEM_TYPE_BASE_URL")

    # Exception handlers
    instance_from_path: bool = Field(default=True, alias="PROBLEM_INSTANCE_FROM_PATH")
    expose_server_error_detail: bool = Field(
        default=False, alias="PROBLEM_EXPOSE_SERVER_ERROR_DETAIL"
    )

    @field_validator("type_base_url", mode="before")
    @classmethod
    def empty_str_to_default(cls, v: str | None) -> str:
        """Fall back to the default base URL for empty values."""
        if v is None or v == "":
            return DEFAULT_TYPE_BASE_URL
        return v

    def type_url_for(self, code: int) -> str:
        """Problem type URI for a status code, e.g. ``https://httpstatuses.com/428``."""
        return f"{self.type_base_url.rstrip('/')}/{code}"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()

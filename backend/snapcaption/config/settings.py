from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "INFO"
    request_log_body_limit: int = 4000

    # Callers normally forward their own key in the x-api-key header.
    # This one is only used when the header is missing.
    openai_api_key: str | None = None
    openai_base_url: str | None = None

    # AI Models
    caption_model: str = "gpt-4o-mini"     # Vision model used for captions
    place_model: str = "gpt-4o-mini"       # Used for place lookups
    temperature: float = 0.9
    top_p: float = 0.95
    max_output_tokens: int = 1200

    # Uploads
    max_upload_bytes: int = 10 * 1024 * 1024
    allowed_image_types: str = "jpeg,jpg,png,gif,webp"

    cors_origins: str = "*"

    place_summary_fallback_chars: int = 200
    default_description: str = "this photo"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def allowed_image_type_list(self) -> list[str]:
        return [t.strip().lower() for t in self.allowed_image_types.split(",") if t.strip()]

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()

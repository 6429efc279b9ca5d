from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_MISSING_KEY_TEXT = "{missing_translation_key}"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LESSONLAB_",
        extra="ignore",
    )

    # Locales
    supported_locales: list[str] = ["en", "nl"]
    default_locale: str = "en"

    # Bundles (empty = packaged lessonlab/i18n/locales)
    locales_dir: str = ""

    # Shown in place of a translation when no key is given
    missing_key_text: str = _MISSING_KEY_TEXT

    @field_validator("supported_locales")
    @classmethod
    def _locales_not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("supported_locales cannot be empty")
        return value

    @model_validator(mode="after")
    def _default_is_supported(self) -> "Settings":
        if self.default_locale not in self.supported_locales:
            raise ValueError(
                f"default_locale {self.default_locale!r} is not one of {self.supported_locales}"
            )
        return self


settings = Settings()


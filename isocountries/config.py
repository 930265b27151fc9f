import os

from pydantic_settings import BaseSettings

_data_dir = os.path.join(os.path.dirname(__file__), "data")


class Settings(BaseSettings):
    model_config = {"env_prefix": "ISOCOUNTRIES_", "env_file": ".env", "env_file_encoding": "utf-8"}

    # Bundled reference data
    DATA_DIR: str = _data_dir
    CODES_FILE: str | None = None  # defaults to DATA_DIR/codes.json

    # Locales
    LOCALES_DIR: str | None = None  # defaults to DATA_DIR/langs
    DEFAULT_LOCALES: list[str] = []  # "*" registers every supported locale

    @property
    def codes_path(self) -> str:
        return self.CODES_FILE or os.path.join(self.DATA_DIR, "codes.json")

    @property
    def locales_path(self) -> str:
        return self.LOCALES_DIR or os.path.join(self.DATA_DIR, "langs")


settings = Settings()

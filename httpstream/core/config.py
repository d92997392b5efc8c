from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    LOG_LEVEL: str = "INFO"

    STORAGE_DIR: str = "storage"          # folder on disk
    STORAGE_BASE_URL: str = "/storage"    # URL prefix to serve files from
    STREAM_CHUNK_SIZE: int = 64 * 1024

    TOLERATE_RANGE_ERRORS: bool = False   # fall back to the full file instead of 416
    DEFAULT_MIME_TYPE: str = "application/octet-stream"

    # diagnostic echo of the status code, off unless a client asks for it
    ECHO_RESPONSE_CODE: bool = False
    RESPONSE_CODE_HEADER: str = "X-Http-Stream-Response-Code"


settings = Settings()

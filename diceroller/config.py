from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DICEROLLER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Fixed seed for the shared random source. Unset means seeded from the clock.
    seed: int | None = None

    # Emit one DEBUG record per simulated roll.
    log_rolls: bool = True


settings = Settings()

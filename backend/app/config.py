"""Application configuration."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "FitTrack API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Database (backs the key-value snapshot store)
    database_url: str = "sqlite+aiosqlite:///./fittrack.db"
    database_echo: bool = False

    # Snapshot keys, one per record domain
    workout_exercises_key: str = "workoutExercises"
    nutrition_meals_key: str = "nutritionMeals"
    progress_entries_key: str = "progressEntries"

    # Daily goals
    calorie_goal: int = 2000
    protein_goal_g: int = 150
    carbs_goal_g: int = 250
    fat_goal_g: int = 65
    water_goal_l: float = 2.5

    # Workout duration estimate
    minutes_per_set: int = 2

    # Notices
    notice_auto_hide_ms: int = 3000

    # CORS
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""
Configuration settings for the critical path library.
Load configuration from environment variables or a project .env file.
"""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
env_file = Path(__file__).parent.parent.parent / '.env'
if env_file.exists():
    load_dotenv(env_file)


class Settings:
    """Application settings loaded from environment variables."""

    # Project paths
    PROJECT_ROOT = Path(__file__).parent.parent.parent

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR: Optional[str] = os.getenv('LOG_DIR') or None
    LOG_MAX_BYTES = int(os.getenv('LOG_MAX_BYTES', '10485760'))  # 10MB
    LOG_BACKUP_COUNT = int(os.getenv('LOG_BACKUP_COUNT', '5'))

    # ============================================================================
    # Benchmark defaults (synthetic plans for `timeplan bench`)
    # ============================================================================
    BENCH_TIMELINES = int(os.getenv('BENCH_TIMELINES', '10'))
    BENCH_LINES_PER_TIMELINE = int(os.getenv('BENCH_LINES_PER_TIMELINE', '100'))
    BENCH_RELATION_DENSITY = float(os.getenv('BENCH_RELATION_DENSITY', '0.1'))

    @classmethod
    def get_log_dir(cls) -> Optional[Path]:
        """Return the log directory, or None when file logging is disabled."""
        if not cls.LOG_DIR:
            return None
        return Path(cls.LOG_DIR)

    @classmethod
    def validate_required_settings(cls) -> list[str]:
        """
        Validate settings values.
        Returns list of problems found (empty if valid).
        """
        problems = []

        if not 0.0 <= cls.BENCH_RELATION_DENSITY <= 1.0:
            problems.append('BENCH_RELATION_DENSITY must be between 0 and 1')
        if cls.BENCH_TIMELINES < 1 or cls.BENCH_LINES_PER_TIMELINE < 1:
            problems.append('BENCH_TIMELINES and BENCH_LINES_PER_TIMELINE must be positive')

        return problems


# Create settings instance
settings = Settings()

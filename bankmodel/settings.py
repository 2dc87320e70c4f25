"""Configuration management for bankmodel."""
import os
from dataclasses import dataclass

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class Settings:
    """Configuration settings for bankmodel.

    Defaults cover everything, so the environment only needs to carry
    the values that differ.
    """

    bank_name: str = 'Banco del estado'

    # Logging Configuration
    log_path: str = 'bankmodel.log'
    log_level: str = 'INFO'

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If BANK_LOG_LEVEL is not a known logging level.
        """
        defaults = cls()
        log_level = os.getenv('BANK_LOG_LEVEL', defaults.log_level).upper()

        if log_level not in LOG_LEVELS:
            raise ValueError(f"BANK_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

        return cls(
            bank_name=os.getenv('BANK_NAME', defaults.bank_name),
            log_path=os.getenv('BANK_LOG_PATH', defaults.log_path),
            log_level=log_level,
        )

import logging
import os

DEFAULT_WORKERS   = 12
DEFAULT_LOG_LEVEL = "WARNING"


class Config:
    """Runtime settings, read from the environment when created."""

    def __init__(self):
        workers = os.environ.get("CIPHER_WORKERS", str(DEFAULT_WORKERS))
        try:
            self.WORKERS = int(workers)
        except ValueError:
            raise ValueError(
                f"CIPHER_WORKERS must be an integer, got {workers!r}."
            ) from None
        if self.WORKERS < 1:
            raise ValueError(
                f"CIPHER_WORKERS must be at least 1, got {self.WORKERS}."
            )
        self.LOG_LEVEL = os.environ.get("CIPHER_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(self.LOG_LEVEL), int):
            raise ValueError(f"Unknown CIPHER_LOG_LEVEL {self.LOG_LEVEL!r}.")


def get_config():
    return Config()

"""
Configuration for the factorial calculator.

Values come from the environment, optionally seeded from a ``.env`` file in the
working directory. ``get_settings`` parses them into a validated Settings model.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class Settings(BaseModel):
    """Runtime settings.

    Attributes:
        max_n (int): Largest accepted input; zero or negative disables the cap.
        benchmark_iterations (int): Default number of calls per benchmark.
        benchmark_workers (int): Default number of concurrent callers.
        benchmark_max_iterations (int): Upper bound for iterations accepted over HTTP.
        benchmark_max_workers (int): Upper bound for concurrent callers accepted over HTTP.
        log_dir (str): Directory for log files.
        log_level (str): Level name for the service loggers.
        host (str): HTTP bind host.
        port (int): HTTP bind port.
    """
    max_n: int = Field(1000, description="Largest accepted n, <= 0 disables the cap")
    benchmark_iterations: int = Field(1000, ge=1)
    benchmark_workers: int = Field(8, ge=1)
    benchmark_max_iterations: int = Field(100000, ge=1)
    benchmark_max_workers: int = Field(64, ge=1)
    log_dir: str = Field("logs", min_length=1)
    log_level: str = Field("INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    host: str = "0.0.0.0"
    port: int = Field(8000, ge=1, le=65535)

    @property
    def effective_max_n(self) -> Optional[int]:
        return self.max_n if self.max_n > 0 else None


_ENV_VARS = {
    "max_n": "FACTORIAL_MAX_N",
    "benchmark_iterations": "BENCHMARK_ITERATIONS",
    "benchmark_workers": "BENCHMARK_WORKERS",
    "benchmark_max_iterations": "BENCHMARK_MAX_ITERATIONS",
    "benchmark_max_workers": "BENCHMARK_MAX_WORKERS",
    "log_dir": "LOG_DIR",
    "log_level": "LOG_LEVEL",
    "host": "HOST",
    "port": "PORT",
}


def get_settings() -> Settings:
    """Read the environment and return validated settings.

    Unset variables fall back to the model defaults.

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value.
    """
    values = {}
    for field_name, env_var in _ENV_VARS.items():
        raw = os.getenv(env_var)
        if raw is not None and raw.strip() != "":
            values[field_name] = raw.strip()
    if "log_level" in values:
        values["log_level"] = values["log_level"].upper()
    return Settings(**values)

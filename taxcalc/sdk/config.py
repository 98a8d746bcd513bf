"""Environment-driven settings for tax calc.

Tax rules directory resolution:
1. TAX_CALC_RULES_PATH environment variable (if set)
2. tax_rules/ inside the installed package

Logging is left to the caller. configure_logging() applies the LOG_LEVEL
environment variable for scripts and notebooks that want SDK debug output.
"""

import logging
import os
from pathlib import Path
from typing import Optional


RULES_PATH_ENV = "TAX_CALC_RULES_PATH"
LOG_LEVEL_ENV = "LOG_LEVEL"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def get_tax_rules_dir() -> Path:
    """Get the tax rules directory path.

    Returns:
        Path to the directory holding {year}.yaml rule files
    """
    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)

    package_root = Path(__file__).parent.parent  # sdk -> taxcalc
    return package_root / "tax_rules"


def get_log_level(default: str = "INFO") -> int:
    """Resolve LOG_LEVEL to a logging level, falling back to default for unknown names."""
    name = os.environ.get(LOG_LEVEL_ENV, default).upper()
    return getattr(logging, name, getattr(logging, default.upper(), logging.INFO))


def configure_logging(level: Optional[int] = None) -> None:
    """Configure root logging from LOG_LEVEL (or an explicit level)."""
    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

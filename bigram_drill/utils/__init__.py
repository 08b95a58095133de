# bigram_drill/utils/__init__.py
# logging and config helpers shared by the CLI

from .config_manager import Config
from .logger_utils import Log, configure_logging

__all__ = ["Config", "Log", "configure_logging"]

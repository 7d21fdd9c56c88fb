from core.config import *
from core.logger import logging


__all__ = [
    "logging",
]

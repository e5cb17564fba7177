"""Shared pytest fixtures and helpers."""

from .database import *  # noqa: F401,F403
from .identity import *  # noqa: F401,F403
from .api import *  # noqa: F401,F403

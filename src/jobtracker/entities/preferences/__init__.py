"""Entity package: Preferences."""

from .entity import Preferences, SalaryRange
from .repository import PreferencesRepository
from .table import PreferencesTable

__all__ = ["Preferences", "PreferencesRepository", "PreferencesTable", "SalaryRange"]

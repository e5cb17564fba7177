"""Preferences repository."""

from src.jobtracker.core.repositories.base import Repository
from src.jobtracker.entities.preferences.entity import Preferences
from src.jobtracker.entities.preferences.table import PreferencesTable


class PreferencesRepository(Repository[Preferences, PreferencesTable]):
    entity_type = Preferences
    table_type = PreferencesTable

"""Job application tracker.

Tracks job postings, the applications made to them, notes on each application
and per-user search preferences, persisted through SQLModel repositories, with
identity delegated to an external authentication provider.
"""

__version__ = "0.1.0"

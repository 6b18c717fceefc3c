"""
Sample retrieval client for the submission REST service.

Fetches sample records as XML, maps them onto :class:`Sample` models and
defines the validator contract implemented by submission-type plugins.
"""

__all__ = [
    "cli",
    "clients",
    "config",
    "logging_utils",
    "models",
    "retry",
    "validators",
]

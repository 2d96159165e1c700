"""Data models for modprep."""
from modprep.models.request import InstantiationRequest, RunResult, RunStatus
from modprep.models.settings import Settings

__all__ = [
    'InstantiationRequest',
    'RunResult',
    'RunStatus',
    'Settings',
]

"""Identity and submission collaborators."""

from .base import IdentityProvider, SubmissionPort
from .http_client import HttpSchedulingClient
from .memory import InMemorySchedulingPort, StaticIdentityProvider

__all__ = [
    "HttpSchedulingClient",
    "IdentityProvider",
    "InMemorySchedulingPort",
    "StaticIdentityProvider",
    "SubmissionPort",
]

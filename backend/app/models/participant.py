"""
Participant model.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Participant:
    """A person taking part in a trip."""
    id: str
    name: str

"""Character models shared by the Psych and CNE converters."""

from psych2cne.models.character import AnimationRecord, CharacterRecord

__all__ = [
    "AnimationRecord",
    "CharacterRecord",
]

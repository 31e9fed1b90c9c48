"""Schema-neutral character models shared by both conversion directions.

Field names describe what the value is; aliases are the Psych (JSON) keys,
so a Psych character file validates directly into a CharacterRecord and
``to_psych()`` writes it back out with the same keys.
"""

from typing import Any, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

Number = Union[int, float]


class AnimationRecord(BaseModel):
    """A single animation, in definition order."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    internal_name: Optional[str] = Field(default=None, alias="anim")  # state name used by game logic
    display_name: Optional[str] = Field(default=None, alias="name")  # sprite-sheet animation label
    fps: Number = 24
    loop: bool = False
    offset: Tuple[Number, Number] = Field(default=(0, 0), alias="offsets")
    frame_indices: List[int] = Field(default_factory=list, alias="indices")

    @field_validator("frame_indices", mode="before")
    @classmethod
    def null_indices_as_empty(cls, v: Any) -> Any:
        """Treat a null index list as no indices."""
        return [] if v is None else v


class CharacterRecord(BaseModel):
    """A full character definition.

    Field order matches the key order of converted Psych JSON.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    animations: List[AnimationRecord] = Field(default_factory=list)
    # Kept as given: only a literal False suppresses the CNE antialiasing attribute
    disable_antialiasing: Any = Field(default=False, alias="no_antialiasing")
    position: Tuple[Number, Number]
    camera_offset: Tuple[Number, Number] = Field(alias="camera_position")
    sing_duration: Number = 4
    flip_x: bool = False
    scale: Number = 1
    image: str = ""
    health_icon: str = Field(default="", alias="healthicon")
    healthbar_color: Tuple[int, int, int] = Field(alias="healthbar_colors")

    @field_validator("image", "health_icon", mode="before")
    @classmethod
    def null_paths_as_empty(cls, v: Any) -> Any:
        """Treat a null sprite path or icon name as empty."""
        return "" if v is None else v

    @classmethod
    def from_psych(cls, data: Mapping[str, Any]) -> 'CharacterRecord':
        """Validate a parsed Psych character JSON object.

        Raises:
            pydantic.ValidationError: If a field has the wrong shape
        """
        return cls.model_validate(data)

    def to_psych(self) -> dict[str, Any]:
        """Dump the record with Psych JSON keys and list-valued pairs."""
        return self.model_dump(mode="json", by_alias=True)

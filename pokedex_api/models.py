"""Pydantic models for Pokedex API responses."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

STAT_NAMES = ("attack", "defense", "hp", "special-attack", "special-defense", "speed")


class CreatureStats(BaseModel):
    """The six battle statistics. Any of them may be missing from the payload."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    attack: int | float | None = None
    defense: int | float | None = None
    hp: int | float | None = None
    special_attack: int | float | None = Field(None, alias="special-attack")
    special_defense: int | float | None = Field(None, alias="special-defense")
    speed: int | float | None = None

    def get(self, stat_name: str) -> float | None:
        """Look up a stat by its API name (e.g. ``"special-attack"``)."""
        if stat_name not in STAT_NAMES:
            raise KeyError(stat_name)
        return getattr(self, stat_name.replace("-", "_"))


class CreatureRecord(BaseModel):
    """A creature as returned by ``GET /?pokemon_name=...``.

    Every field is optional; absent values stay ``None`` (or empty for
    ``sprites``) so that rendering can show an "unknown" placeholder.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str | None = None
    height: int | float | None = None  # decimeters
    weight: int | float | None = None  # hectograms
    types: list[str] | None = None
    abilities: list[str] | None = None
    stats: CreatureStats = Field(default_factory=CreatureStats)
    sprites: list[str] = []
    cries: str | None = None

    @field_validator("stats", mode="before")
    @classmethod
    def _null_stats(cls, value):
        return {} if value is None else value

    @field_validator("sprites", mode="before")
    @classmethod
    def _null_sprites(cls, value):
        return [] if value is None else value

    @field_validator("cries", mode="before")
    @classmethod
    def _blank_cries(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def display_name(self) -> str:
        """Name with the first letter upper-cased, or an empty string."""
        if not self.name:
            return ""
        return self.name[0].upper() + self.name[1:]


class ErrorBody(BaseModel):
    """Structured error body returned with a non-2xx status."""

    msg: str

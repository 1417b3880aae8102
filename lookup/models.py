"""Models for lookup queries, lookup states and the lookup API contract."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.exceptions import InvalidQueryError
from pokedex_api.models import CreatureRecord


class LookupQuery(BaseModel):
    """A trimmed, non-empty creature name."""

    model_config = ConfigDict(frozen=True)

    name: str

    @field_validator("name")
    @classmethod
    def _strip_and_require(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("query must not be empty")
        return value

    @classmethod
    def parse(cls, raw: "str | LookupQuery | None") -> "LookupQuery":
        """Build a query from user input.

        Raises:
            InvalidQueryError: If the input is missing, empty or whitespace-only
        """
        if isinstance(raw, LookupQuery):
            return raw
        try:
            return cls(name=raw)
        except ValidationError as e:
            raise InvalidQueryError("Lookup query must not be empty", details={"raw": raw}) from e

    def __str__(self) -> str:
        return self.name


class Idle(BaseModel):
    """No lookup has been dispatched yet."""

    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    """A lookup for ``query`` is in flight."""

    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"
    query: str


class Success(BaseModel):
    """The latest applied lookup returned a record."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    query: str
    record: CreatureRecord


class Failure(BaseModel):
    """The latest applied lookup failed; ``message`` is shown to the user."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"
    query: str
    message: str


LookupState = Annotated[Idle | Loading | Success | Failure, Field(discriminator="status")]


class LookupRequest(BaseModel):
    """Request body for the POST /lookup endpoint."""

    pokemon_name: str
    location: str = "/"


class LookupResponse(BaseModel):
    """Session snapshot after a lookup submission."""

    state: LookupState
    audio_src: str | None = None
    location: str

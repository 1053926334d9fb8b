"""Data models for the Glosbe lookup pipeline."""

from typing import Any, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .utils import encode_component


class Query(BaseModel):
    """A trimmed, percent-encoded word or phrase ready for outbound requests."""

    model_config = ConfigDict(frozen=True)

    text: str
    encoded: str

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["Query"]:
        """Normalize raw host input; returns None for non-string or blank input."""
        if not isinstance(raw, str):
            return None
        text = raw.strip()
        if not text:
            return None
        return cls(text=text, encoded=encode_component(text))


def _lenient_entries(model, value):
    """Validate list entries one by one; malformed entries become empty models."""
    if not isinstance(value, list):
        return None
    entries = []
    for item in value:
        try:
            entries.append(model.model_validate(item))
        except ValidationError:
            entries.append(model())
    return entries


class Meaning(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    text: Optional[str] = None


class Phrase(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    text: Optional[str] = None


class TranslationUnit(BaseModel):
    """One candidate translation group (an entry of ``tuc``)."""

    meanings: Optional[List[Meaning]] = None
    phrase: Optional[Phrase] = None

    @field_validator("meanings", mode="before")
    @classmethod
    def _lenient_meanings(cls, value):
        return _lenient_entries(Meaning, value)

    @field_validator("phrase", mode="before")
    @classmethod
    def _lenient_phrase(cls, value):
        try:
            return Phrase.model_validate(value)
        except ValidationError:
            return None


class ExamplePair(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    first: Optional[str] = None  # source text
    second: Optional[str] = None  # target text


class StructuredResult(BaseModel):
    """Parsed response of the JSON translate endpoint.

    Only the top level must be an object. Non-list ``tuc``/``examples`` are
    ignored and malformed entries are kept as empty ones, so one off-type
    field does not discard the usable lines around it.
    """

    tuc: Optional[List[TranslationUnit]] = None
    examples: Optional[List[ExamplePair]] = None

    @field_validator("tuc", mode="before")
    @classmethod
    def _lenient_tuc(cls, value):
        return _lenient_entries(TranslationUnit, value)

    @field_validator("examples", mode="before")
    @classmethod
    def _lenient_examples(cls, value):
        return _lenient_entries(ExamplePair, value)


class ScrapedResult(BaseModel):
    """Text fragments gathered from the rendered HTML page."""

    meanings: List[str] = []
    examples: List[str] = []
    description: Optional[str] = None
    body_text: str = ""


class FetchResponse(BaseModel):
    """Status and decoded body of a single HTTP GET."""

    status: int
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class StageOutcome(BaseModel):
    """Tagged result of one pipeline stage."""

    kind: Literal["success", "fallthrough"]
    lines: List[str] = []

    @classmethod
    def success(cls, lines: List[str]) -> "StageOutcome":
        return cls(kind="success", lines=lines)

    @classmethod
    def fallthrough(cls) -> "StageOutcome":
        return cls(kind="fallthrough")

    @property
    def succeeded(self) -> bool:
        return self.kind == "success"

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _null_as_empty_list(v):
    return [] if v is None else v


def _null_as_empty_str(v):
    return "" if v is None else v


class _UpstreamModel(BaseModel):
    """Records decoded from the dictionary API.

    Unknown fields (license, sourceUrls, ...) are ignored. A JSON null in a
    list or required-text field decodes as empty.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Phonetic(_UpstreamModel):
    text: Optional[str] = None
    audio: Optional[str] = None


class Definition(_UpstreamModel):
    definition: str = ""
    example: Optional[str] = None
    synonyms: List[str] = Field(default_factory=list)
    antonyms: List[str] = Field(default_factory=list)

    null_lists = field_validator("synonyms", "antonyms", mode="before")(_null_as_empty_list)
    null_text = field_validator("definition", mode="before")(_null_as_empty_str)


class Meaning(_UpstreamModel):
    part_of_speech: str = Field("", alias="partOfSpeech")
    definitions: List[Definition] = Field(default_factory=list)

    null_lists = field_validator("definitions", mode="before")(_null_as_empty_list)
    null_text = field_validator("part_of_speech", mode="before")(_null_as_empty_str)


class Entry(_UpstreamModel):
    """One headword as returned by the API; a lookup may yield several."""
    word: str = ""
    phonetic: Optional[str] = None
    phonetics: List[Phonetic] = Field(default_factory=list)
    meanings: List[Meaning] = Field(default_factory=list)

    null_lists = field_validator("phonetics", "meanings", mode="before")(_null_as_empty_list)
    null_text = field_validator("word", mode="before")(_null_as_empty_str)

"""
Script and normalized-text data models.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Script(str, Enum):
    """Writing system a piece of text is (mostly) written in."""

    ARABIC = "arabic"
    LATIN = "latin"
    MIXED = "mixed"


class NormalizedString(BaseModel):
    """
    Canonical form of a surface string, used for equality and substring tests.

    Attributes:
        text: The canonical text
        script: The script whose rules produced ``text``
    """

    text: str = Field(
        ...,
        description="Canonical text after normalization",
    )
    script: Script = Field(
        ...,
        description="Script whose normalization rules were applied",
    )

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self.text)

    def __bool__(self) -> bool:
        return bool(self.text)

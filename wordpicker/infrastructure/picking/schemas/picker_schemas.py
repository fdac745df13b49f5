"""Pydantic schemas for picker session API request/response validation."""

from typing import Literal

from pydantic import BaseModel, Field


class PickerSessionCreateRequest(BaseModel):
    """Schema for starting a picker session."""

    text: str = Field(..., description="Pasted article text")


class MergeRequest(BaseModel):
    """Schema for merging two selected words or phrases."""

    first: int = Field(..., ge=0, description="Position of the first token")
    second: int = Field(..., ge=0, description="Position of the second token")


class PanelPointerRequest(BaseModel):
    """Schema for pointer movement over the panel."""

    x: int = Field(..., description="Pointer x coordinate in pixels")
    y: int = Field(..., description="Pointer y coordinate in pixels")


class PanelPressRequest(PanelPointerRequest):
    """Schema for pressing the pointer on the panel."""

    in_content: bool = Field(False, description="Whether the press landed in the content region")


class TokenResponse(BaseModel):
    """Schema for a single token."""

    text: str
    position: int
    kind: Literal["word", "newline", "other"]


class PhraseResponse(BaseModel):
    """Schema for a phrase."""

    positions: list[int] = Field(..., description="Member positions, ascending")
    text: str = Field(..., description="Member token texts joined by a space")


class PanelStateResponse(BaseModel):
    """Schema for the panel's position and flags."""

    x: int
    y: int
    width: int
    minimized: bool
    dragging: bool


class PickerSessionResponse(BaseModel):
    """Schema for the full picker session state."""

    id: str
    mode: Literal["picking"] = "picking"
    tokens: list[TokenResponse]
    selected: list[int] = Field(..., description="Selected positions, ascending")
    phrases: list[PhraseResponse]
    adjacent_pairs: list[tuple[int, int]] = Field(
        ..., description="Consecutive selected words that can be merged"
    )
    selected_count: int
    phrase_count: int
    panel: PanelStateResponse


class PanelWordResponse(BaseModel):
    """Schema for one word card in the panel."""

    word: str
    phonetic: str | None = None
    definitions: list[str]
    loading: bool
    error: str | None = None


class PanelViewResponse(PanelStateResponse):
    """Schema for the panel contents."""

    visible: bool = Field(..., description="False when nothing is picked")
    item_count: int
    phrases: list[str]
    words: list[PanelWordResponse]


class ExportDocumentResponse(BaseModel):
    """Schema for the export document."""

    exportedAt: str = Field(..., description="ISO-8601 export timestamp")  # noqa: N815
    words: list[str]
    phrases: list[str]

"""DTOs for the floating meaning panel."""

from dataclasses import dataclass, field


@dataclass
class PanelWordView:
    """One word card: the word and whatever the cache knows about it."""

    word: str
    phonetic: str | None = None
    definitions: list[str] = field(default_factory=list)
    loading: bool = True
    error: str | None = None


@dataclass
class PanelView:
    """Everything the client needs to draw the panel."""

    visible: bool
    item_count: int
    phrases: list[str]
    words: list[PanelWordView]
    x: int
    y: int
    width: int
    minimized: bool
    dragging: bool

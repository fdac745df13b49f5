"""
Picking bounded context - Domain layer.

Turns a pasted article into clickable tokens and tracks what the user
picked from it:
- Tokenization and word normalization
- Word selection and phrase merging
- Merge candidates and the export document
- Floating panel state

Aggregates:
- PickerSession: tokens, selection, phrases and panel of one article
"""

from .entities import (
    DefinitionRecord,
    PanelPosition,
    PanelState,
    Phrase,
    PhraseSet,
    PickerSession,
    SelectionSet,
    Token,
    TokenKind,
)
from .services import (
    AdjacencyScanner,
    ArticleTokenizer,
    ExportDocument,
    ExportEncoder,
    normalize_word,
)

__all__ = [
    "AdjacencyScanner",
    "ArticleTokenizer",
    "DefinitionRecord",
    "ExportDocument",
    "ExportEncoder",
    "PanelPosition",
    "PanelState",
    "Phrase",
    "PhraseSet",
    "PickerSession",
    "SelectionSet",
    "Token",
    "TokenKind",
    "normalize_word",
]

from .definition import DefinitionRecord
from .panel import PanelPosition, PanelState
from .phrase import Phrase, PhraseSet
from .picker_session import PickerSession
from .selection import SelectionSet
from .token import Token, TokenKind

__all__ = [
    "DefinitionRecord",
    "PanelPosition",
    "PanelState",
    "Phrase",
    "PhraseSet",
    "PickerSession",
    "SelectionSet",
    "Token",
    "TokenKind",
]

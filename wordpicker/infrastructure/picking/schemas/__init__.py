from .picker_schemas import (
    ExportDocumentResponse,
    MergeRequest,
    PanelPointerRequest,
    PanelPressRequest,
    PanelStateResponse,
    PanelViewResponse,
    PanelWordResponse,
    PhraseResponse,
    PickerSessionCreateRequest,
    PickerSessionResponse,
    TokenResponse,
)

__all__ = [
    "ExportDocumentResponse",
    "MergeRequest",
    "PanelPointerRequest",
    "PanelPressRequest",
    "PanelStateResponse",
    "PanelViewResponse",
    "PanelWordResponse",
    "PhraseResponse",
    "PickerSessionCreateRequest",
    "PickerSessionResponse",
    "TokenResponse",
]

"""Mapper for PickerSession domain → API schema conversion."""

from wordpicker.application.picking.use_cases.dtos.panel_dtos import PanelView
from wordpicker.domain.picking.entities.panel import PanelState
from wordpicker.domain.picking.entities.picker_session import PickerSession
from wordpicker.infrastructure.picking.schemas.picker_schemas import (
    PanelStateResponse,
    PanelViewResponse,
    PanelWordResponse,
    PhraseResponse,
    PickerSessionResponse,
    TokenResponse,
)


class PickerSessionMapper:
    """Mapper for PickerSession domain → API schema conversion."""

    def to_response(
        self, session: PickerSession, adjacent_pairs: list[tuple[int, int]]
    ) -> PickerSessionResponse:
        return PickerSessionResponse(
            id=str(session.id),
            tokens=[
                TokenResponse(text=t.text, position=t.position, kind=t.kind.value)
                for t in session.tokens
            ],
            selected=session.selection.sorted(),
            phrases=[
                PhraseResponse(positions=list(p.positions), text=session.phrase_text(p))
                for p in session.phrases
            ],
            adjacent_pairs=adjacent_pairs,
            selected_count=len(session.selection),
            phrase_count=len(session.phrases),
            panel=self.panel_to_response(session.panel),
        )

    def panel_to_response(self, panel: PanelState) -> PanelStateResponse:
        return PanelStateResponse(
            x=panel.position.x,
            y=panel.position.y,
            width=panel.width,
            minimized=panel.minimized,
            dragging=panel.dragging,
        )

    def panel_view_to_response(self, view: PanelView) -> PanelViewResponse:
        return PanelViewResponse(
            visible=view.visible,
            item_count=view.item_count,
            phrases=view.phrases,
            words=[
                PanelWordResponse(
                    word=w.word,
                    phonetic=w.phonetic,
                    definitions=w.definitions,
                    loading=w.loading,
                    error=w.error,
                )
                for w in view.words
            ],
            x=view.x,
            y=view.y,
            width=view.width,
            minimized=view.minimized,
            dragging=view.dragging,
        )

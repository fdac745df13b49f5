"""Use case for picking words and phrases out of an article."""

import re
from datetime import datetime
from uuid import UUID

import structlog

from wordpicker.application.picking.protocols.picker_session_repository import (
    PickerSessionRepositoryProtocol,
)
from wordpicker.application.picking.services.definition_cache import DefinitionCacheRegistry
from wordpicker.application.picking.use_cases.dtos.panel_dtos import PanelView, PanelWordView
from wordpicker.constants import PANEL_DEFINITIONS_SHOWN
from wordpicker.domain.common.domain_event import DomainEvent
from wordpicker.domain.common.value_objects import PickerSessionId
from wordpicker.domain.picking.entities.picker_session import PickerSession
from wordpicker.domain.picking.services.adjacency_scanner import AdjacencyScanner
from wordpicker.domain.picking.services.export_encoder import ExportDocument, ExportEncoder
from wordpicker.domain.picking.services.tokenizer import ArticleTokenizer
from wordpicker.exceptions import ArticleTooLongError, SessionNotFoundError

logger = structlog.get_logger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class PickerSessionUseCase:
    """
    Application entry point for the article word picker.

    Every state change is followed by enrichment: each effective single
    word of the session gets a dictionary lookup through the session's
    definition cache. Mutating methods must run on the event loop.
    """

    def __init__(
        self,
        session_repository: PickerSessionRepositoryProtocol,
        definition_caches: DefinitionCacheRegistry,
        tokenizer: ArticleTokenizer,
        adjacency_scanner: AdjacencyScanner,
        export_encoder: ExportEncoder,
        max_article_length: int | None = None,
    ) -> None:
        """Initialize use case with repository protocols and domain services."""
        self.session_repository = session_repository
        self.definition_caches = definition_caches
        self.tokenizer = tokenizer
        self.adjacency_scanner = adjacency_scanner
        self.export_encoder = export_encoder
        self.max_article_length = max_article_length

    def start_session(self, text: str) -> PickerSession:
        """
        Tokenize a pasted article and open a picker session for it.

        The oldest sessions beyond the repository's cap are evicted together
        with their definition caches.

        Args:
            text: Pasted article text

        Returns:
            New picker session with nothing selected

        Raises:
            EmptyArticleError: If text is empty or whitespace only
            ArticleTooLongError: If text exceeds the configured cap
        """
        if self.max_article_length is not None and len(text) > self.max_article_length:
            raise ArticleTooLongError(len(text), self.max_article_length)

        session = PickerSession.start(text, self.tokenizer)
        session = self.session_repository.save(session)
        self.definition_caches.for_session(session.id)

        for evicted_id in self.session_repository.evict_overflow():
            self.definition_caches.discard(evicted_id)
            logger.info("picker_session_evicted", session_id=str(evicted_id))

        logger.info(
            "picker_session_started",
            session_id=str(session.id),
            article_length=len(session.text),
            token_count=len(session.tokens),
            word_count=len(session.word_tokens()),
            active_sessions=self.session_repository.count(),
        )
        return session

    def get_session(self, session_id: UUID | str) -> PickerSession:
        session_id_vo = PickerSessionId.parse(session_id)
        session = self.session_repository.find_by_id(session_id_vo)
        if not session:
            raise SessionNotFoundError(session_id)
        return session

    def toggle_token(self, session_id: UUID | str, position: int) -> PickerSession:
        """
        Select, deselect, or dissolve the phrase at a token position.

        Non-word positions are ignored and leave the session unchanged.
        """
        session = self.get_session(session_id)
        if not session.toggle(position):
            logger.debug("toggle_ignored", session_id=str(session.id), position=position)
        self._commit(session)
        return session

    def merge_tokens(self, session_id: UUID | str, first: int, second: int) -> PickerSession:
        """
        Merge two selected words, or their phrases, into one phrase.

        Raises:
            InvalidPositionError: If a position is not a selected word
            ValidationError: If both positions are the same
        """
        session = self.get_session(session_id)
        session.merge(first, second)
        self._commit(session)
        return session

    def adjacent_pairs(self, session: PickerSession) -> list[tuple[int, int]]:
        return self.adjacency_scanner.find_adjacent_pairs(
            session.tokens, session.selection, session.phrases
        )

    def export(self, session_id: UUID | str, exported_at: datetime | None = None) -> ExportDocument:
        """Encode the session's current picks as an export document."""
        session = self.get_session(session_id)
        document = self.export_encoder.encode(
            session.tokens, session.selection, session.phrases, exported_at
        )
        logger.info(
            "selection_exported",
            session_id=str(session.id),
            word_count=len(document.words),
            phrase_count=len(document.phrases),
        )
        return document

    def reset(self, session_id: UUID | str) -> None:
        """Discard a session together with its definition cache."""
        session = self.get_session(session_id)
        self.session_repository.delete(session.id)
        self.definition_caches.discard(session.id)
        logger.info("picker_session_reset", session_id=str(session.id))

    # Panel

    def press_panel(
        self, session_id: UUID | str, x: int, y: int, *, in_content: bool = False
    ) -> PickerSession:
        session = self.get_session(session_id)
        session.panel.press(x, y, in_content=in_content)
        self.session_repository.save(session)
        return session

    def move_panel(self, session_id: UUID | str, x: int, y: int) -> PickerSession:
        session = self.get_session(session_id)
        session.panel.move(x, y)
        self.session_repository.save(session)
        return session

    def release_panel(self, session_id: UUID | str) -> PickerSession:
        session = self.get_session(session_id)
        session.panel.release()
        self.session_repository.save(session)
        return session

    def toggle_panel_minimized(self, session_id: UUID | str) -> PickerSession:
        session = self.get_session(session_id)
        session.panel.toggle_minimized()
        self.session_repository.save(session)
        return session

    def panel_view(self, session_id: UUID | str) -> PanelView:
        """
        Build the panel contents: phrases first, then word cards.

        Words shown here are looked up if they have not been already.
        """
        session = self.get_session(session_id)
        self._enrich(session)

        records = self.definition_caches.for_session(session.id).snapshot()
        words: list[PanelWordView] = []
        for word in session.effective_words():
            record = records.get(word)
            if record is None:
                words.append(PanelWordView(word=word))
                continue
            words.append(
                PanelWordView(
                    word=word,
                    phonetic=record.phonetic,
                    definitions=list(record.definitions[:PANEL_DEFINITIONS_SHOWN]),
                    loading=record.loading,
                    error=record.error,
                )
            )

        phrases = session.phrase_texts()
        panel = session.panel
        return PanelView(
            visible=bool(words or phrases),
            item_count=len(words) + len(phrases),
            phrases=phrases,
            words=words,
            x=panel.position.x,
            y=panel.position.y,
            width=panel.width,
            minimized=panel.minimized,
            dragging=panel.dragging,
        )

    def _commit(self, session: PickerSession) -> None:
        self.session_repository.save(session)
        for event in session.collect_events():
            _log_event(event)
        self._enrich(session)

    def _enrich(self, session: PickerSession) -> None:
        cache = self.definition_caches.for_session(session.id)
        for word in session.effective_words():
            cache.ensure_fetched(word)


def _log_event(event: DomainEvent) -> None:
    payload = event.to_dict()
    payload.pop("event_type", None)
    payload.pop("event_id", None)
    logger.info(_CAMEL_BOUNDARY.sub("_", event.event_type).lower(), **payload)

from dependency_injector import containers, providers

from wordpicker.application.picking.services.definition_cache import DefinitionCacheRegistry
from wordpicker.application.picking.use_cases.picker_session_use_case import (
    PickerSessionUseCase,
)
from wordpicker.config import get_settings
from wordpicker.domain.picking.services.adjacency_scanner import AdjacencyScanner
from wordpicker.domain.picking.services.export_encoder import ExportEncoder
from wordpicker.domain.picking.services.tokenizer import ArticleTokenizer
from wordpicker.infrastructure.dictionary.free_dictionary_client import FreeDictionaryClient
from wordpicker.infrastructure.picking.repositories.picker_session_repository import (
    InMemoryPickerSessionRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # External services
    dictionary_service = providers.Singleton(
        FreeDictionaryClient,
        base_url=settings.provided.DICTIONARY_API_URL,
        timeout=settings.provided.DICTIONARY_TIMEOUT,
    )

    # Repositories (process lifetime, in memory)
    picker_session_repository = providers.Singleton(
        InMemoryPickerSessionRepository,
        max_sessions=settings.provided.MAX_PICKER_SESSIONS,
    )
    definition_cache_registry = providers.Singleton(
        DefinitionCacheRegistry,
        dictionary_service=dictionary_service,
    )

    # Domain services (pure domain logic)
    article_tokenizer = providers.Factory(ArticleTokenizer)
    adjacency_scanner = providers.Factory(AdjacencyScanner)
    export_encoder = providers.Factory(ExportEncoder)

    # Picking module, application use cases
    picker_session_use_case = providers.Factory(
        PickerSessionUseCase,
        session_repository=picker_session_repository,
        definition_caches=definition_cache_registry,
        tokenizer=article_tokenizer,
        adjacency_scanner=adjacency_scanner,
        export_encoder=export_encoder,
        max_article_length=settings.provided.MAX_ARTICLE_LENGTH,
    )


# Initialize container
container = Container()

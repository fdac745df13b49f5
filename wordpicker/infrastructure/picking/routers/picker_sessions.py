"""Picker session endpoints: start, inspect, toggle, merge, export, reset."""

from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import JSONResponse
from starlette import status

from wordpicker.application.picking.use_cases.picker_session_use_case import (
    PickerSessionUseCase,
)
from wordpicker.core import container
from wordpicker.domain.common.exceptions import DomainError
from wordpicker.exceptions import WordPickerError
from wordpicker.infrastructure.common.di import inject_use_case
from wordpicker.infrastructure.picking.mappers.picker_session_mapper import PickerSessionMapper
from wordpicker.infrastructure.picking.schemas import (
    ExportDocumentResponse,
    MergeRequest,
    PickerSessionCreateRequest,
    PickerSessionResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/picker/sessions", tags=["picker"])

mapper = PickerSessionMapper()


def _unexpected(action: str, e: Exception, **context: object) -> HTTPException:
    logger.error(f"failed_to_{action}", error=str(e), exc_info=True, **context)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.post(
    "",
    response_model=PickerSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def start_picker_session(
    request: PickerSessionCreateRequest,
    use_case: PickerSessionUseCase = Depends(inject_use_case(container.picker_session_use_case)),
) -> PickerSessionResponse:
    """
    Tokenize a pasted article and start picking words from it.

    Args:
        request: Request containing the article text
        use_case: PickerSessionUseCase injected via dependency container

    Returns:
        The new session with every token and nothing selected

    Raises:
        HTTPException: 400 if the article is blank or too long
    """
    try:
        session = use_case.start_session(request.text)
        return mapper.to_response(session, use_case.adjacent_pairs(session))
    except (WordPickerError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("start_picker_session", e) from e


@router.get(
    "/{session_id}",
    response_model=PickerSessionResponse,
    status_code=status.HTTP_200_OK,
)
async def get_picker_session(
    session_id: UUID,
    use_case: PickerSessionUseCase = Depends(inject_use_case(container.picker_session_use_case)),
) -> PickerSessionResponse:
    """Get the current tokens, selection, phrases and merge candidates."""
    session = use_case.get_session(session_id)
    return mapper.to_response(session, use_case.adjacent_pairs(session))


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def reset_picker_session(
    session_id: UUID,
    use_case: PickerSessionUseCase = Depends(inject_use_case(container.picker_session_use_case)),
) -> Response:
    """
    Reset the picker: discard tokens, selection, phrases and definitions.

    Lookups still in flight are abandoned.
    """
    use_case.reset(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{session_id}/tokens/{position}/toggle",
    response_model=PickerSessionResponse,
    status_code=status.HTTP_200_OK,
)
async def toggle_token(
    session_id: UUID,
    position: int,
    use_case: PickerSessionUseCase = Depends(inject_use_case(container.picker_session_use_case)),
) -> PickerSessionResponse:
    """
    Click a token.

    Selects or deselects a word; clicking a word inside a phrase dissolves
    the whole phrase. Clicks on punctuation, whitespace or unknown positions
    change nothing.
    """
    try:
        session = use_case.toggle_token(session_id, position)
        return mapper.to_response(session, use_case.adjacent_pairs(session))
    except (WordPickerError, DomainError):
        raise
    except Exception as e:
        raise _unexpected(
            "toggle_token", e, session_id=str(session_id), position=position
        ) from e


@router.post(
    "/{session_id}/merge",
    response_model=PickerSessionResponse,
    status_code=status.HTTP_200_OK,
)
async def merge_tokens(
    session_id: UUID,
    request: MergeRequest,
    use_case: PickerSessionUseCase = Depends(inject_use_case(container.picker_session_use_case)),
) -> PickerSessionResponse:
    """
    Merge two selected words (or the phrases holding them) into one phrase.

    Raises:
        HTTPException: 400 if a position is not a selected word
    """
    try:
        session = use_case.merge_tokens(session_id, request.first, request.second)
        return mapper.to_response(session, use_case.adjacent_pairs(session))
    except (WordPickerError, DomainError):
        raise
    except Exception as e:
        raise _unexpected("merge_tokens", e, session_id=str(session_id)) from e


@router.get(
    "/{session_id}/export",
    response_model=ExportDocumentResponse,
    status_code=status.HTTP_200_OK,
)
async def export_selection(
    session_id: UUID,
    use_case: PickerSessionUseCase = Depends(inject_use_case(container.picker_session_use_case)),
) -> JSONResponse:
    """
    Export the selected words and phrases as a downloadable JSON document.

    The response carries a Content-Disposition header naming the file
    selected-words-<date>.json.
    """
    document = use_case.export(session_id)
    return JSONResponse(
        content=document.to_json(),
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )

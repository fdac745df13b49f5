"""Floating meaning panel endpoints."""

from uuid import UUID

import structlog
from fastapi import APIRouter, Depends
from starlette import status

from wordpicker.application.picking.use_cases.picker_session_use_case import (
    PickerSessionUseCase,
)
from wordpicker.core import container
from wordpicker.infrastructure.common.di import inject_use_case
from wordpicker.infrastructure.picking.mappers.picker_session_mapper import PickerSessionMapper
from wordpicker.infrastructure.picking.schemas import (
    PanelPointerRequest,
    PanelPressRequest,
    PanelStateResponse,
    PanelViewResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/picker/sessions/{session_id}/panel", tags=["picker-panel"])

mapper = PickerSessionMapper()


@router.get(
    "",
    response_model=PanelViewResponse,
    status_code=status.HTTP_200_OK,
)
async def get_panel(
    session_id: UUID,
    use_case: PickerSessionUseCase = Depends(inject_use_case(container.picker_session_use_case)),
) -> PanelViewResponse:
    """
    Get the panel contents: phrases, word cards with definitions, position.

    visible is false when nothing is picked; the client must not show the
    panel then. Definitions still being looked up are reported as loading.
    """
    view = use_case.panel_view(session_id)
    return mapper.panel_view_to_response(view)


@router.post(
    "/press",
    response_model=PanelStateResponse,
    status_code=status.HTTP_200_OK,
)
async def press_panel(
    session_id: UUID,
    request: PanelPressRequest,
    use_case: PickerSessionUseCase = Depends(inject_use_case(container.picker_session_use_case)),
) -> PanelStateResponse:
    """Press the pointer on the panel; starts a drag unless inside the content."""
    session = use_case.press_panel(session_id, request.x, request.y, in_content=request.in_content)
    return mapper.panel_to_response(session.panel)


@router.post(
    "/move",
    response_model=PanelStateResponse,
    status_code=status.HTTP_200_OK,
)
async def move_panel(
    session_id: UUID,
    request: PanelPointerRequest,
    use_case: PickerSessionUseCase = Depends(inject_use_case(container.picker_session_use_case)),
) -> PanelStateResponse:
    """Move the pointer; the panel follows only while dragging."""
    session = use_case.move_panel(session_id, request.x, request.y)
    return mapper.panel_to_response(session.panel)


@router.post(
    "/release",
    response_model=PanelStateResponse,
    status_code=status.HTTP_200_OK,
)
async def release_panel(
    session_id: UUID,
    use_case: PickerSessionUseCase = Depends(inject_use_case(container.picker_session_use_case)),
) -> PanelStateResponse:
    """Release the pointer, ending any drag."""
    session = use_case.release_panel(session_id)
    return mapper.panel_to_response(session.panel)


@router.post(
    "/minimize",
    response_model=PanelStateResponse,
    status_code=status.HTTP_200_OK,
)
async def toggle_panel_minimized(
    session_id: UUID,
    use_case: PickerSessionUseCase = Depends(inject_use_case(container.picker_session_use_case)),
) -> PanelStateResponse:
    """Collapse the panel to its header, or expand it again."""
    session = use_case.toggle_panel_minimized(session_id)
    logger.debug(
        "panel_minimize_toggled", session_id=str(session.id), minimized=session.panel.minimized
    )
    return mapper.panel_to_response(session.panel)

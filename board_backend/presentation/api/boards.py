"""
Boards API Router - FastAPI endpoints for board posts.

Endpoints:
- POST   /v1/boards        - Register a board (multipart: "request" JSON + "image")
- GET    /v1/boards        - Page through boards, optional ?keyword= search
- GET    /v1/boards/{id}   - Read one board
- PUT    /v1/boards/{id}   - Replace a board (multipart, same shape as register)
- DELETE /v1/boards/{id}   - Soft-delete a board

Thin layer: parses HTTP input, builds Command/Query objects, wraps results
in ApiResponse. Domain errors are left to the handlers in presentation/errors.py.

Flow:
  HTTP Request -> Router -> Command -> Handler -> Repository -> Database
                                 |
  HTTP Response <- Router <- Result <-
"""

from logging import getLogger
from typing import Optional, Type, TypeVar

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, File, Form, Query, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from board_backend.application.commands.boards import (
    DeleteBoardCommand,
    DeleteBoardHandler,
    RegisterBoardCommand,
    RegisterBoardHandler,
    UpdateBoardCommand,
    UpdateBoardHandler,
)
from board_backend.application.dto.board import (
    BoardCreateRequest,
    BoardDTO,
    BoardPageDTO,
    BoardUpdateRequest,
)
from board_backend.application.queries.boards import (
    PageBoardsHandler,
    PageBoardsQuery,
    ReadBoardHandler,
    ReadBoardQuery,
    SearchBoardsHandler,
    SearchBoardsQuery,
)
from board_backend.config.settings import Config
from board_backend.domain.exceptions import BoardNotFoundError
from board_backend.domain.value_objects.board_id import BoardId
from board_backend.domain.value_objects.image_upload import ImageUpload
from board_backend.domain.value_objects.member_id import MemberId
from board_backend.domain.value_objects.pagination import PageRequest
from board_backend.presentation.envelope import ApiResponse

logger = getLogger(__name__)

RequestModel = TypeVar("RequestModel", bound=BaseModel)


# ==================== HELPERS ====================


def _parse_request_part(raw: str, model: Type[RequestModel]) -> RequestModel:
    """Validate the JSON "request" part before anything reaches a handler."""
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError(
            e.errors(include_url=False, include_context=False)
        ) from e


async def _read_image(image: Optional[UploadFile]) -> Optional[ImageUpload]:
    if image is None:
        return None
    content = await image.read()
    return ImageUpload(
        filename=image.filename or "image",
        content=content,
        content_type=image.content_type,
    )


# ==================== ROUTER ====================

router = APIRouter(prefix="/v1/boards", tags=["boards"])


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=ApiResponse[None],
    status_code=status.HTTP_200_OK,
)
@inject
async def register_board(
    handler: FromDishka[RegisterBoardHandler],
    request: str = Form(...),
    image: Optional[UploadFile] = File(default=None),
):
    """
    Register a new board.

    Request: multipart/form-data
    - request: JSON string, e.g.
      '{"memberId": 1, "boardTitle": "...", "boardContent": "...", "category": "FREE"}'
    - image: binary image (optional, may be empty -> default image)
    """
    body = _parse_request_part(request, BoardCreateRequest)
    command = RegisterBoardCommand(
        member_id=MemberId(body.member_id),
        title=body.board_title,
        content=body.board_content,
        category=body.category,
        image=await _read_image(image),
    )
    await handler.execute(command)
    return ApiResponse.ok(None)


@router.get(
    "",
    response_model=ApiResponse[BoardPageDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_boards(
    page_handler: FromDishka[PageBoardsHandler],
    search_handler: FromDishka[SearchBoardsHandler],
    page: int = Query(default=1, ge=1),
    size: int = Query(
        default=Config.BOARD_DEFAULT_PAGE_SIZE, ge=1, le=Config.BOARD_MAX_PAGE_SIZE
    ),
    keyword: Optional[str] = Query(default=None),
):
    """
    List boards ordered by id (ascending).

    With a non-blank keyword only boards whose title or author matches are returned.
    """
    page_request = PageRequest(page=page, size=size)
    if keyword and keyword.strip():
        result = await search_handler.execute(
            SearchBoardsQuery(keyword=keyword, page_request=page_request)
        )
    else:
        result = await page_handler.execute(PageBoardsQuery(page_request=page_request))

    return ApiResponse[BoardPageDTO].ok(BoardPageDTO.from_page(result))


@router.get(
    "/{board_id}",
    response_model=ApiResponse[BoardDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def read_board(
    handler: FromDishka[ReadBoardHandler],
    board_id: int,
):
    """Read one board. Missing and soft-deleted boards both answer 404."""
    logger.info(f"[ReadBoard] board_id={board_id}")
    board = await handler.execute(ReadBoardQuery(board_id=_board_id(board_id)))
    return ApiResponse[BoardDTO].ok(board)


@router.put(
    "/{board_id}",
    response_model=ApiResponse[BoardDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def update_board(
    handler: FromDishka[UpdateBoardHandler],
    board_id: int,
    request: str = Form(...),
    image: Optional[UploadFile] = File(default=None),
):
    """
    Replace a board.

    Every field is overwritten; leaving out the image resets it to the default image.
    """
    body = _parse_request_part(request, BoardUpdateRequest)
    command = UpdateBoardCommand(
        board_id=_board_id(board_id),
        member_id=MemberId(body.member_id),
        title=body.board_title,
        content=body.board_content,
        category=body.category,
        image=await _read_image(image),
    )
    board = await handler.execute(command)
    return ApiResponse[BoardDTO].ok(BoardDTO.from_entity(board))


@router.delete(
    "/{board_id}",
    response_model=ApiResponse[BoardDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def delete_board(
    handler: FromDishka[DeleteBoardHandler],
    board_id: int,
):
    """Soft-delete a board. The row stays, reads stop returning it."""
    board = await handler.execute(DeleteBoardCommand(board_id=_board_id(board_id)))
    return ApiResponse[BoardDTO].ok(BoardDTO.from_entity(board))


def _board_id(raw: int) -> BoardId:
    # Ids start at 1, so anything lower can only name a board that doesn't exist
    if raw <= 0:
        raise BoardNotFoundError()
    return BoardId(raw)

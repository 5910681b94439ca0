"""
Command endpoints for collection CRUD.

Each endpoint maps one gateway operation onto HTTP. Gateway errors are turned
into JSON error responses by the handlers registered in
register_exception_handlers().
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from ..db import GatewayFactory
from ..exceptions import GatewayError, IdentifierExtractionError, InvalidIdentifier, StoreOperationError
from ..models import Record

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Items"])


class HTTP:
    """HTTP status codes for errors"""
    BAD_REQUEST = 400
    INTERNAL_ERROR = 500


def update_response(data: Any) -> Dict[str, Any]:
    return {"status": "success", "data": data}


@router.get('/{collection}')
async def list_items(collection: str) -> Dict[str, Any]:
    """Every decodable document in the collection"""
    records = await GatewayFactory.get_instance().list_documents(collection)
    return update_response([record.model_dump() for record in records])


@router.post('/{collection}')
async def create_item(collection: str, item: Record) -> Dict[str, Any]:
    new_id = await GatewayFactory.get_instance().create(collection, item)
    return update_response({"id": new_id})


@router.put('/{collection}/{item_id}')
async def update_item(collection: str, item_id: str, item: Record) -> Dict[str, Any]:
    """Overwrite fields of an item; modified is false when nothing changed"""
    modified = await GatewayFactory.get_instance().update(collection, item_id, item)
    return update_response({"modified": modified})


@router.delete('/{collection}/{item_id}')
async def delete_item(collection: str, item_id: str) -> Dict[str, Any]:
    deleted = await GatewayFactory.get_instance().delete(collection, item_id)
    return update_response({"deleted": deleted})


def _message(exc: Exception) -> str:
    return exc.message if isinstance(exc, GatewayError) else str(exc)


def _error_response(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "status": "error",
            "error_type": exc.__class__.__name__,
            "message": _message(exc),
        },
    )


async def invalid_identifier_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning(f"[{HTTP.BAD_REQUEST}] {request.method} {request.url.path}: {_message(exc)}")
    return _error_response(HTTP.BAD_REQUEST, exc)


async def store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"[{HTTP.INTERNAL_ERROR}] {request.method} {request.url.path}: {_message(exc)}")
    return _error_response(HTTP.INTERNAL_ERROR, exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidIdentifier, invalid_identifier_handler)
    app.add_exception_handler(StoreOperationError, store_error_handler)
    app.add_exception_handler(IdentifierExtractionError, store_error_handler)

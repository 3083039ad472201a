"""
API entrypoint.

A single route serves every resource: the ``path`` query parameter selects
the controller, ``id`` selects the row, and the JSON body carries the data.
"""

import json
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from recruitment.api.controller import ResourceController
from recruitment.api.v1.applications import ApplicationController
from recruitment.api.v1.backgrounds import (
    AcademicBackgroundController,
    EmploymentBackgroundController,
)
from recruitment.api.v1.job_offers import JobOfferController
from recruitment.api.v1.users import UserController
from recruitment.core.errors import InvalidRequestError, NotFoundError
from recruitment.db.session import get_db

api_router = APIRouter()

# Resource name (``?path=``) -> controller
CONTROLLERS: dict[str, type[ResourceController]] = {
    "postulacion": ApplicationController,
    "usuario": UserController,
    "oferta_laboral": JobOfferController,
    "antecedente_laboral": EmploymentBackgroundController,
    "antecedente_academico": AcademicBackgroundController,
}

ENTRYPOINT_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def read_payload(request: Request) -> Optional[dict]:
    """Decode the JSON body; an empty body decodes to None."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        payload = json.loads(raw)
    except ValueError as e:
        raise InvalidRequestError("Request body is not valid JSON") from e
    if payload is None:
        return None
    if not isinstance(payload, dict):
        raise InvalidRequestError("Request body must be a JSON object")
    return payload


@api_router.api_route("/", methods=ENTRYPOINT_METHODS)
async def entrypoint(
    request: Request,
    path: str = Query("", description="Resource name"),
    row_id: Optional[int] = Query(None, alias="id", description="Row id"),
    db: Session = Depends(get_db),
):
    """
    Dispatch a request to the controller named by ``path``.

    OPTIONS (CORS preflight) is answered immediately with 200.
    """
    if request.method == "OPTIONS":
        return JSONResponse(status_code=200, content={})

    controller_class = CONTROLLERS.get(path)
    if controller_class is None:
        raise NotFoundError("Route not found")

    payload = await read_payload(request)
    controller = controller_class(db, request.query_params)
    # Controllers use the blocking session and bcrypt
    return await run_in_threadpool(controller.dispatch, request.method, payload, row_id)

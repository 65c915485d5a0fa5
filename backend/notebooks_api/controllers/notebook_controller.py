"""
Notebooks API — Notebook Controller
====================================

What:  Handles POST /notebooks.
How:   Same field-by-field check as the user controller (title, notes,
       username), then a synchronous call to the injected NotebookService.
"""

import logging

from fastapi import APIRouter
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from notebooks_api.controllers.request_body import (
    first_missing_field,
    missing_value_message,
    read_json_object,
)
from notebooks_api.exceptions import NotebookValidationError
from notebooks_api.schemas.notebook import CreateNotebookDTO, NotebookCreatedResponse
from notebooks_api.schemas.user import MessageResponse
from notebooks_api.services.notebook_base import NotebookService

logger = logging.getLogger(__name__)

CREATE_NOTEBOOK_FIELDS = ("title", "notes", "username")


class NotebookController:
    """Stateless handlers for the notebooks resource."""

    def __init__(self, notebook_service: NotebookService):
        self.notebook_service = notebook_service

    async def create_notebook(self, request: Request) -> Response:
        """200 `{"id": ...}` on success, 400 for invalid input, 500 otherwise."""
        body = await read_json_object(request)

        missing = first_missing_field(body, CREATE_NOTEBOOK_FIELDS)
        if missing:
            logger.info("create_notebook rejected: missing %s", missing)
            return JSONResponse(status_code=400, content=missing_value_message(missing))

        notebook = CreateNotebookDTO(**{field: body[field] for field in CREATE_NOTEBOOK_FIELDS})

        try:
            notebook_id = self.notebook_service.create_notebook(notebook)
            response = JSONResponse(
                status_code=200,
                content=NotebookCreatedResponse(id=notebook_id).model_dump(),
            )
        except NotebookValidationError as e:
            logger.info("create_notebook rejected by service: %s", e.message)
            return JSONResponse(status_code=400, content={"msg": e.message})
        except Exception:
            logger.exception("create_notebook: unexpected failure")
            return Response(status_code=500)

        return response

    def get_router(self) -> APIRouter:
        router = APIRouter(prefix="/notebooks", tags=["Notebooks"])
        router.add_api_route(
            "",
            self.create_notebook,
            methods=["POST"],
            summary="Create a notebook",
            response_model=NotebookCreatedResponse,
            responses={400: {"description": "Invalid notebook", "model": MessageResponse}},
        )
        router.add_api_route("/", self.create_notebook, methods=["POST"], include_in_schema=False)
        return router

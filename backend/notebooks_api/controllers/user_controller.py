"""
Notebooks API — User Controller
================================

What:  Handles account creation, login and token lookup.
How:   Reads the raw JSON body, checks required fields in a fixed order,
       awaits the injected UserService and maps its result or UserError
       variant to a status code and JSON body.
Who:   Mounted under /users by create_app().

Routes:
    GET  /users        → get_user     (Authorization: Bearer <token>)
    POST /users        → create_user  (CreateUserDTO)
    POST /users/login  → login_user   (UserLoginDTO)

Error mapping:
    Each operation has its own table from UserError subclass to
    (status, message). A variant missing from the table, or any other
    exception, is answered with the operation's 500 response.
"""

import logging
import re
from typing import Dict, Optional, Tuple, Type

from fastapi import APIRouter
from fastapi.encoders import jsonable_encoder
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from notebooks_api.controllers.request_body import (
    first_missing_field,
    missing_value_message,
    read_json_object,
)
from notebooks_api.exceptions import (
    UserDuplicateError,
    UserError,
    UserNotFoundError,
    UserTokenError,
    UserWrongPasswordError,
)
from notebooks_api.schemas.user import CreateUserDTO, MessageResponse, UserLoginDTO
from notebooks_api.services.user_base import UserService

logger = logging.getLogger(__name__)

ErrorTable = Dict[Type[UserError], Tuple[int, str]]

# Wire names, in the order they are checked
CREATE_USER_FIELDS = ("email", "fullName", "password", "username")
LOGIN_FIELDS = ("login", "password")

BEARER_PATTERN = re.compile(r"^Bearer ([^ ]+)$")

MISSING_AUTHORIZATION_MSG = "Header without authorization token."
MALFORMED_AUTHORIZATION_MSG = "Authorization not in required format."
INVALID_TOKEN_MSG = "Invalid token."
INTERNAL_ERROR_MSG = "Internal Server Error."

CREATE_USER_ERRORS: ErrorTable = {
    UserDuplicateError: (409, "duplicated user"),
}

# "user not found" answers 409, not 404; clients already depend on it
LOGIN_USER_ERRORS: ErrorTable = {
    UserNotFoundError: (409, "user not found"),
    UserWrongPasswordError: (401, "unauthorized user"),
}

GET_USER_ERRORS: ErrorTable = {
    UserTokenError: (401, INVALID_TOKEN_MSG),
}


def lookup_error(table: ErrorTable, error: UserError) -> Optional[Tuple[int, str]]:
    """Return the (status, message) registered for `error`'s class, if any."""
    for error_type in type(error).__mro__:
        if error_type in table:
            return table[error_type]
    return None


class UserController:
    """
    Stateless handlers for the users resource.

    Args:
        user_service: the UserService every handler delegates to.
    """

    def __init__(self, user_service: UserService):
        self.user_service = user_service

    async def create_user(self, request: Request) -> Response:
        """
        Create an account.

        201 with an empty body on success; 400 naming the first missing
        field; 409 for a duplicate; 500 with an empty body otherwise.
        """
        body = await read_json_object(request)

        missing = first_missing_field(body, CREATE_USER_FIELDS)
        if missing:
            logger.info("create_user rejected: missing %s", missing)
            return JSONResponse(status_code=400, content=missing_value_message(missing))

        user = CreateUserDTO(**{field: body[field] for field in CREATE_USER_FIELDS})

        try:
            await self.user_service.create_user(user)
        except UserError as e:
            mapped = lookup_error(CREATE_USER_ERRORS, e)
            if mapped is None:
                logger.error("create_user: unmapped %s: %s", type(e).__name__, e.context)
                return Response(status_code=500)
            status, msg = mapped
            logger.warning("create_user failed for %s: %s", user.username, e.message)
            return JSONResponse(status_code=status, content={"msg": msg})
        except Exception:
            logger.exception("create_user: unexpected service failure")
            return Response(status_code=500)

        logger.info("User created: %s", user.username)
        return Response(status_code=201)

    async def login_user(self, request: Request) -> Response:
        """
        Authenticate a user.

        200 with the service's login result unchanged; 400 when login or
        password is missing (login checked first); 409 when the user does
        not exist; 401 for a wrong password; 500 with an empty body otherwise.
        """
        body = await read_json_object(request)

        missing = first_missing_field(body, LOGIN_FIELDS)
        if missing:
            logger.info("login_user rejected: missing %s", missing)
            return JSONResponse(status_code=400, content=missing_value_message(missing))

        credentials = UserLoginDTO(login=body["login"], password=body["password"])

        try:
            result = await self.user_service.login_user(credentials)
            response = JSONResponse(status_code=200, content=jsonable_encoder(result))
        except UserError as e:
            mapped = lookup_error(LOGIN_USER_ERRORS, e)
            if mapped is None:
                logger.error("login_user: unmapped %s: %s", type(e).__name__, e.context)
                return Response(status_code=500)
            status, msg = mapped
            logger.warning("login_user failed for %s: %s", credentials.login, e.message)
            return JSONResponse(status_code=status, content={"msg": msg})
        except Exception:
            logger.exception("login_user: unexpected failure")
            return Response(status_code=500)

        return response

    async def get_user(self, request: Request) -> Response:
        """
        Look up the user owning the bearer token.

        200 with the service's user data; 400 when the Authorization header
        is missing or not `Bearer <token>`; 401 for an invalid token; 500
        with a generic message otherwise.
        """
        authorization = request.headers.get("authorization")

        if not isinstance(authorization, str):
            return JSONResponse(status_code=400, content={"msg": MISSING_AUTHORIZATION_MSG})

        match = BEARER_PATTERN.match(authorization)
        if not match:
            return JSONResponse(status_code=400, content={"msg": MALFORMED_AUTHORIZATION_MSG})

        token = match.group(1)

        try:
            data = await self.user_service.get_user(token)
            response = JSONResponse(status_code=200, content=jsonable_encoder(data))
        except UserError as e:
            mapped = lookup_error(GET_USER_ERRORS, e)
            if mapped is None:
                logger.error("get_user: unmapped %s: %s", type(e).__name__, e.context)
                return JSONResponse(status_code=500, content={"msg": INTERNAL_ERROR_MSG})
            status, msg = mapped
            logger.warning("get_user rejected token: %s", e.message)
            return JSONResponse(status_code=status, content={"msg": msg})
        except Exception:
            logger.exception("get_user: unexpected failure")
            return JSONResponse(status_code=500, content={"msg": INTERNAL_ERROR_MSG})

        return response

    def get_router(self) -> APIRouter:
        """Build the /users router bound to this controller."""
        router = APIRouter(prefix="/users", tags=["Users"])

        router.add_api_route(
            "",
            self.get_user,
            methods=["GET"],
            summary="Get the user owning a bearer token",
            responses={
                400: {"description": "Missing or malformed Authorization header", "model": MessageResponse},
                401: {"description": "Invalid token", "model": MessageResponse},
            },
        )
        router.add_api_route(
            "",
            self.create_user,
            methods=["POST"],
            status_code=201,
            summary="Create a user",
            responses={
                400: {"description": "Missing field", "model": MessageResponse},
                409: {"description": "Duplicated user", "model": MessageResponse},
            },
        )
        # Trailing-slash aliases, answered directly instead of redirected
        router.add_api_route("/", self.get_user, methods=["GET"], include_in_schema=False)
        router.add_api_route(
            "/", self.create_user, methods=["POST"], status_code=201, include_in_schema=False
        )
        router.add_api_route(
            "/login",
            self.login_user,
            methods=["POST"],
            summary="Log a user in",
            responses={
                400: {"description": "Missing login or password", "model": MessageResponse},
                401: {"description": "Wrong password", "model": MessageResponse},
                409: {"description": "User not found", "model": MessageResponse},
            },
        )

        return router

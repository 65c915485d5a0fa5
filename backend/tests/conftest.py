"""
Notebooks API — Test Configuration (conftest.py)
=================================================

What:  Shared fixtures: fake services implementing the abstract contracts
       and an httpx AsyncClient bound to an app built around them.

Fixtures:
    ├── user_service:      FakeUserService (scriptable results and errors)
    ├── notebook_service:  FakeNotebookService (returns "new-id")
    ├── app:               create_app() around the two fakes
    └── test_client:       HTTPX AsyncClient over ASGITransport
"""

import os
from typing import Any, List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

os.environ["LOG_LEVEL"] = "WARNING"
os.environ["USER_SERVICE"] = ""
os.environ["NOTEBOOK_SERVICE"] = ""

from notebooks_api.main import create_app  # noqa: E402
from notebooks_api.schemas.notebook import CreateNotebookDTO  # noqa: E402
from notebooks_api.schemas.user import CreateUserDTO, UserLoginDTO  # noqa: E402
from notebooks_api.services.notebook_base import NotebookService  # noqa: E402
from notebooks_api.services.user_base import UserService  # noqa: E402


class FakeUserService(UserService):
    """
    Records every call and returns (or raises) whatever the test sets.

    Set `error` to make the next calls raise it.
    """

    def __init__(self):
        self.created: List[CreateUserDTO] = []
        self.logins: List[UserLoginDTO] = []
        self.tokens: List[str] = []
        self.login_result: Any = {"accessToken": "token-123"}
        self.user_data: Any = {"username": "pimpim", "email": "pim@example.com", "fullName": "Pim Pim"}
        self.valid_token = "abc123"
        self.error: Optional[Exception] = None

    async def create_user(self, user: CreateUserDTO) -> None:
        self.created.append(user)
        if self.error:
            raise self.error

    async def login_user(self, credentials: UserLoginDTO) -> Any:
        self.logins.append(credentials)
        if self.error:
            raise self.error
        return self.login_result

    async def get_user(self, token: str) -> Any:
        self.tokens.append(token)
        if self.error:
            raise self.error
        return self.user_data


class FakeNotebookService(NotebookService):
    def __init__(self):
        self.created: List[CreateNotebookDTO] = []
        self.notebook_id: Any = "new-id"
        self.error: Optional[Exception] = None

    def create_notebook(self, notebook: CreateNotebookDTO) -> str:
        self.created.append(notebook)
        if self.error:
            raise self.error
        return self.notebook_id


@pytest.fixture
def user_service():
    return FakeUserService()


@pytest.fixture
def notebook_service():
    return FakeNotebookService()


@pytest.fixture
def app(user_service, notebook_service):
    return create_app(user_service=user_service, notebook_service=notebook_service)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient talking to the app in-process.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

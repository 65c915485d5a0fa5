"""
Notebooks API — Service Loader Tests
=====================================

What:  load_service() resolution and rejection paths, plus create_app()
       picking services up from settings.
How:   Each test writes a throwaway module into tmp_path and puts it on
       sys.path with monkeypatch.
"""

import textwrap

import pytest
from httpx import ASGITransport, AsyncClient

from notebooks_api.config import settings
from notebooks_api.exceptions import ServiceConfigurationError
from notebooks_api.main import create_app
from notebooks_api.services.loader import load_service
from notebooks_api.services.notebook_base import NotebookService
from notebooks_api.services.user_base import UserService

SERVICES_MODULE = textwrap.dedent(
    '''
    from notebooks_api.services.notebook_base import NotebookService
    from notebooks_api.services.user_base import UserService


    class StaticNotebookService(NotebookService):
        def create_notebook(self, notebook):
            return "static-id"


    class StaticUserService(UserService):
        async def create_user(self, user):
            return None

        async def login_user(self, credentials):
            return {"accessToken": "static"}

        async def get_user(self, token):
            return {"username": "static"}


    def build_notebook_service():
        return StaticNotebookService()


    def build_with_argument(repository):
        return StaticNotebookService()


    shared_notebook_service = StaticNotebookService()
    not_a_service = "plain string"
    '''
)


@pytest.fixture
def services_module(tmp_path, monkeypatch):
    (tmp_path / "loader_fixture_services.py").write_text(SERVICES_MODULE)
    monkeypatch.syspath_prepend(str(tmp_path))
    return "loader_fixture_services"


class TestLoadService:

    def test_load_class(self, services_module):
        service = load_service(f"{services_module}:StaticNotebookService", NotebookService)

        assert isinstance(service, NotebookService)
        assert service.create_notebook(None) == "static-id"

    def test_load_factory(self, services_module):
        service = load_service(f"{services_module}:build_notebook_service", NotebookService)

        assert isinstance(service, NotebookService)

    def test_load_instance(self, services_module):
        service = load_service(f"{services_module}:shared_notebook_service", NotebookService)

        assert service.create_notebook(None) == "static-id"

    @pytest.mark.parametrize("path", ["", "no_colon_here", ":Attribute", "module:"])
    def test_rejects_malformed_path(self, path):
        with pytest.raises(ServiceConfigurationError):
            load_service(path, NotebookService)

    def test_rejects_unknown_module(self):
        with pytest.raises(ServiceConfigurationError, match="module import failed"):
            load_service("does_not_exist_anywhere:Service", NotebookService)

    def test_rejects_unknown_attribute(self, services_module):
        with pytest.raises(ServiceConfigurationError, match="not found"):
            load_service(f"{services_module}:Missing", NotebookService)

    def test_rejects_wrong_interface(self, services_module):
        with pytest.raises(ServiceConfigurationError, match="is not a UserService"):
            load_service(f"{services_module}:StaticNotebookService", UserService)

    def test_rejects_non_service_value(self, services_module):
        with pytest.raises(ServiceConfigurationError):
            load_service(f"{services_module}:not_a_service", NotebookService)

    def test_rejects_factory_needing_arguments(self, services_module):
        with pytest.raises(ServiceConfigurationError, match="factory call failed"):
            load_service(f"{services_module}:build_with_argument", NotebookService)


class TestCreateAppFromSettings:

    @pytest.mark.asyncio
    async def test_services_loaded_from_settings(self, services_module, monkeypatch):
        monkeypatch.setattr(settings, "user_service", f"{services_module}:StaticUserService")
        monkeypatch.setattr(settings, "notebook_service", f"{services_module}:build_notebook_service")

        app = create_app()

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            login = await client.post("/users/login", json={"login": "a", "password": "b"})
            notebook = await client.post(
                "/notebooks", json={"title": "t", "notes": "n", "username": "u"}
            )

        assert login.json() == {"accessToken": "static"}
        assert notebook.json() == {"id": "static-id"}

    def test_missing_configuration_fails_fast(self, monkeypatch):
        monkeypatch.setattr(settings, "user_service", "")
        monkeypatch.setattr(settings, "notebook_service", "")

        with pytest.raises(ServiceConfigurationError, match="no import path configured"):
            create_app()

"""
Notebooks API — Notebook Service Unit Tests
============================================

What:  RepositoryNotebookService id assignment, validation and storage,
       with the repository mocked.
"""

import uuid
from unittest.mock import MagicMock

import pytest

from notebooks_api.exceptions import NotebookPersistError, NotebookValidationError
from notebooks_api.schemas.notebook import CreateNotebookDTO, Notebook
from notebooks_api.services.notebook_base import NotebookRepository
from notebooks_api.services.notebook_service import RepositoryNotebookService


class TestRepositoryNotebookService:

    def setup_method(self):
        self.repository = MagicMock(spec=NotebookRepository)
        self.repository.insert_notebook.return_value = True
        self.service = RepositoryNotebookService(self.repository)
        self.dto = CreateNotebookDTO(title="notebook", notes="content", username="pimpim")

    def test_create_notebook_returns_uuid(self):
        notebook_id = self.service.create_notebook(self.dto)

        assert uuid.UUID(notebook_id).version == 4

    def test_create_notebook_stores_notebook_with_id(self):
        notebook_id = self.service.create_notebook(self.dto)

        self.repository.insert_notebook.assert_called_once()
        stored = self.repository.insert_notebook.call_args.args[0]
        assert stored == Notebook(id=notebook_id, title="notebook", notes="content", username="pimpim")

    def test_create_notebook_ids_are_distinct(self):
        ids = {self.service.create_notebook(self.dto) for _ in range(5)}

        assert len(ids) == 5

    def test_create_notebook_insert_refused(self):
        self.repository.insert_notebook.return_value = False

        with pytest.raises(NotebookPersistError) as exc_info:
            self.service.create_notebook(self.dto)

        assert exc_info.value.notebook_id is not None

    @pytest.mark.parametrize("field", ["title", "notes", "username"])
    def test_create_notebook_blank_field(self, field):
        dto = self.dto.model_copy(update={field: "   "})

        with pytest.raises(NotebookValidationError, match=f"missing {field} value") as exc_info:
            self.service.create_notebook(dto)

        assert exc_info.value.field == field
        self.repository.insert_notebook.assert_not_called()

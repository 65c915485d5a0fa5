"""
Notebooks API — Repository-backed Notebook Service
===================================================

What:  NotebookService implementation that assigns notebook ids and hands
       notebooks to a NotebookRepository.
Who:   Wired into NotebookController by create_app(), directly or through
       NOTEBOOK_SERVICE (via a factory that supplies the repository).

Flow (POST /notebooks):
    ┌────────────┐    ┌──────────────┐    ┌──────────────┐
    │ Controller │───▶│  Validate &  │───▶│  Repository  │
    │  (DTO)     │    │  assign id   │    │  insert      │
    └────────────┘    └──────────────┘    └──────────────┘

The service holds no state besides the repository reference.
"""

import logging
import uuid

from notebooks_api.exceptions import NotebookPersistError, NotebookValidationError
from notebooks_api.schemas.notebook import CreateNotebookDTO, Notebook
from notebooks_api.services.notebook_base import NotebookRepository, NotebookService

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "notes", "username")


class RepositoryNotebookService(NotebookService):
    """
    Creates notebooks through an injected NotebookRepository.

    Ids are UUID4 strings, so they are unique without asking the repository.
    """

    def __init__(self, repository: NotebookRepository):
        self.repository = repository

    def create_notebook(self, notebook: CreateNotebookDTO) -> str:
        """
        Validate, assign an id, store, and return the id.

        Raises:
            NotebookValidationError: title, notes or username is blank.
            NotebookPersistError: the repository returned False.
        """
        for field in REQUIRED_FIELDS:
            if not getattr(notebook, field).strip():
                raise NotebookValidationError(message=f"missing {field} value", field=field)

        notebook_id = str(uuid.uuid4())
        record = Notebook(id=notebook_id, **notebook.model_dump())

        if not self.repository.insert_notebook(record):
            logger.error("Repository rejected notebook %s", notebook_id)
            raise NotebookPersistError(notebook_id=notebook_id)

        logger.info("Notebook created: %s (owner=%s)", notebook_id, notebook.username)
        return notebook_id

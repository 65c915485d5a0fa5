"""
Notebooks API — Abstract Notebook Interfaces
=============================================

What:  Contracts for notebook creation (NotebookService) and notebook
       storage (NotebookRepository).
Who:   NotebookController depends on NotebookService only;
       RepositoryNotebookService depends on NotebookRepository.

Both contracts are synchronous: creating a notebook returns its id directly.
"""

from abc import ABC, abstractmethod

from notebooks_api.schemas.notebook import CreateNotebookDTO, Notebook


class NotebookService(ABC):
    """Abstract interface for notebook creation."""

    @abstractmethod
    def create_notebook(self, notebook: CreateNotebookDTO) -> str:
        """
        Create a notebook and return its new identifier.

        Raises:
            NotebookValidationError: the notebook is rejected as invalid.
        """
        ...


class NotebookRepository(ABC):
    """Abstract storage for notebooks."""

    @abstractmethod
    def insert_notebook(self, notebook: Notebook) -> bool:
        """Store `notebook`; return False when it could not be stored."""
        ...

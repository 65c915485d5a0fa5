"""
Notebooks API — Notebook Schemas
=================================

What:  Pydantic models for notebook creation and the stored notebook.
Who:   NotebookController builds CreateNotebookDTO; the notebook service
       turns it into a Notebook carrying the id it assigns.
"""

from pydantic import BaseModel, Field


class CreateNotebookDTO(BaseModel):
    """Notebook creation payload for POST /notebooks."""
    title: str = Field(description="Notebook title")
    notes: str = Field(description="Free-text notebook content, stored as is")
    username: str = Field(description="Owner's username")


class Notebook(BaseModel):
    """A notebook as handed to the repository. `id` is never set by clients."""
    id: str
    title: str
    notes: str
    username: str


class NotebookCreatedResponse(BaseModel):
    """Body of a successful POST /notebooks."""
    id: str = Field(description="Identifier assigned to the new notebook")

# Services package init
"""
Notebooks API — Services Layer
===============================

What:  Contracts the controllers depend on, plus the implementations that
       ship with this package.

Service Inventory:
    - UserService (abstract): account creation, login, token lookup.
      Implemented outside this package (hashing and token issuance live there).
    - NotebookService (abstract): notebook creation.
    - NotebookRepository (abstract): notebook storage contract.
    - RepositoryNotebookService: NotebookService backed by a NotebookRepository.
    - load_service: resolves a configured "module:attribute" into a service.
"""

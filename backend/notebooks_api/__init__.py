"""
Notebooks API — Package Initializer
====================================

What: Marks `notebooks_api` as a Python package and carries its version.
Who:  Imported by uvicorn (`notebooks_api.main:create_app`), pytest and the
      health route.

Layering:

    ┌─────────────────────────────────────┐
    │     Controllers (HTTP layer)        │  ← validation, status codes
    ├─────────────────────────────────────┤
    │   Services (injected contracts)     │  ← users, notebooks
    ├─────────────────────────────────────┤
    │   Repositories (storage contract)   │  ← implemented elsewhere
    └─────────────────────────────────────┘

    Controllers only ever see the abstract service classes; the concrete
    implementations are passed to create_app() or named in configuration.
"""

__version__ = "1.0.0"

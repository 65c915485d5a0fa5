# Controllers package init
"""
Notebooks API — Controllers
============================

What:  HTTP handlers for the users and notebooks resources.
How:   Each controller is constructed with its service and exposes
       get_router(), which create_app() mounts.

    - user_controller.py:      GET /users, POST /users, POST /users/login
    - notebook_controller.py:  POST /notebooks

Controllers hold no state besides the injected service.
"""

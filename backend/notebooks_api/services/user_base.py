"""
Notebooks API — Abstract User Service Interface
================================================

What:  The contract UserController is constructed with.
How:   A concrete service (password hashing, token issuance, storage) inherits
       from UserService and implements the three coroutines below.
Who:   Called by UserController; implementations are selected through
       create_app() arguments or the USER_SERVICE setting.
"""

from abc import ABC, abstractmethod
from typing import Any

from notebooks_api.schemas.user import CreateUserDTO, UserLoginDTO


class UserService(ABC):
    """
    Abstract interface for user accounts.

    Contract:
        - Failures are reported only through the UserError variants in
          notebooks_api.exceptions; anything else is treated as unexpected.
        - Return values must be JSON-serializable (dicts, lists, pydantic
          models); the controller sends them to the client unchanged.
    """

    @abstractmethod
    async def create_user(self, user: CreateUserDTO) -> None:
        """
        Register a new account.

        Raises:
            UserDuplicateError: username or email already taken.
        """
        ...

    @abstractmethod
    async def login_user(self, credentials: UserLoginDTO) -> Any:
        """
        Authenticate and return the login result (typically `{"accessToken": ...}`).

        Raises:
            UserNotFoundError: no account matches `credentials.login`.
            UserWrongPasswordError: the password does not match.
        """
        ...

    @abstractmethod
    async def get_user(self, token: str) -> Any:
        """
        Return the public data of the account owning `token`.

        Raises:
            UserTokenError: the token is not valid.
        """
        ...

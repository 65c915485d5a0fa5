"""
Notebooks API — Service Loader
===============================

What:  Turns a configured import path into a service instance.
How:   "package.module:attribute" → import module → resolve attribute →
       call it when callable (a class or a zero-argument factory) → check
       the result implements the expected interface.
Who:   create_app() for every service not passed in explicitly.
"""

import importlib
import logging
from typing import Type, TypeVar

from notebooks_api.exceptions import ServiceConfigurationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_service(path: str, interface: Type[T]) -> T:
    """
    Resolve `path` into an instance of `interface`.

    Raises:
        ServiceConfigurationError: for an empty or malformed path, a module
            or attribute that cannot be found, or a result of the wrong type.
    """
    if not path:
        raise ServiceConfigurationError(path, "no import path configured")

    module_name, sep, attribute = path.partition(":")
    if not sep or not module_name or not attribute:
        raise ServiceConfigurationError(path, "expected 'package.module:attribute'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ServiceConfigurationError(path, f"module import failed ({e})") from e

    target = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ServiceConfigurationError(path, f"attribute '{attribute}' not found") from e

    if isinstance(target, interface):
        service = target
    elif callable(target):
        try:
            service = target()
        except TypeError as e:
            raise ServiceConfigurationError(path, f"factory call failed ({e})") from e
    else:
        service = target

    if not isinstance(service, interface):
        raise ServiceConfigurationError(
            path, f"{type(service).__name__} is not a {interface.__name__}"
        )

    logger.info("Loaded %s from %s", interface.__name__, path)
    return service

"""Deprecation notices for renamed methods."""

from __future__ import annotations

import warnings
from collections.abc import Callable
from typing import Any

import wrapt

from variantkit._config import get_config
from variantkit._logging import get_logger

__all__ = ['deprecated', 'warn_deprecation']

log = get_logger(__name__)


def warn_deprecation(message: str, *, stacklevel: int = 3) -> None:
    """Emit a non-fatal deprecation notice.

    The notice goes out as a ``DeprecationWarning`` and as a structlog
    ``deprecated_call`` event. Disabling assertions silences both.
    """
    if not get_config().assertions:
        return
    log.warning('deprecated_call', message=message)
    warnings.warn(
        f'{message}\n    Remove this warning by setting VARIANTKIT_ASSERTIONS=none',
        DeprecationWarning,
        stacklevel=stacklevel,
    )


def deprecated(message: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator: warn with message on every call, then run the wrapped function.

    Example:
        ```python
        @deprecated('`.get()` is deprecated, and has been renamed to `.unsafe_get()`.')
        def get(self):
            return self.unsafe_get()
        ```
    """

    @wrapt.decorator
    def _wrapper(wrapped, instance, args, kwargs):
        warn_deprecation(message, stacklevel=3)
        return wrapped(*args, **kwargs)

    return _wrapper

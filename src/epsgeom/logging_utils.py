"""Logging utilities for epsgeom.

Provides a consistent logger hierarchy under the ``epsgeom`` namespace
without touching the process root logger.  Library code obtains its
logger via ``get_logger(__name__)``; applications that want to see
epsgeom's diagnostics call ``configure_logging()``.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

ROOT_NAME = 'epsgeom'

_FORMAT = logging.Formatter('%(levelname)s %(name)s: %(message)s')


def _epsgeom_root() -> logging.Logger:
    return logging.getLogger(ROOT_NAME)


def _ensure_stream_handler(root: logging.Logger) -> None:
    """Attach a single stdout handler to the ``epsgeom`` logger,
    replacing the NullHandler installed by the package ``__init__``.
    """
    for h in list(root.handlers):
        if isinstance(h, logging.NullHandler):
            root.removeHandler(h)
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(_FORMAT)
        root.addHandler(handler)
    # do not propagate to the process root
    root.propagate = False


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).upper(), None)
    if not isinstance(value, int):
        raise ValueError(f'unknown logging level: {level!r}')
    return value


def configure_logging(level: Union[str, int] = 'INFO') -> logging.Logger:
    """Configure the ``epsgeom`` logger family and return its root.

    This does NOT modify the process root logger.
    """
    root = _epsgeom_root()
    _ensure_stream_handler(root)
    root.setLevel(_to_level(level))
    return root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the ``epsgeom`` namespace.

    Names outside the namespace are prefixed with ``epsgeom.``.  Without
    an explicit level the logger is left at NOTSET so it inherits from
    the ``epsgeom`` parent configured via ``configure_logging()``.
    """
    if name != ROOT_NAME and not name.startswith(ROOT_NAME + '.'):
        name = f'{ROOT_NAME}.{name}'
    log = logging.getLogger(name)
    log.setLevel(_to_level(level) if level is not None else logging.NOTSET)
    return log


__all__ = ['get_logger', 'configure_logging', 'ROOT_NAME']

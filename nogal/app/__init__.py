"""App-level APIs.

This package contains the curation engine and thin functions intended to be
called by the CLI. It keeps the front-end decoupled from engine internals.
"""

from . import api

__all__ = ["api"]

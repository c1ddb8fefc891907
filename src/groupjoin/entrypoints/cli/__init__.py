"""groupjoin command-line interface."""

from .main import groupjoin

__all__ = ["groupjoin"]

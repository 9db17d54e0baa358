# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, diff_sections, DiffConfig
from .log import UndiffableError, EditScriptFormatError
from .patching import patch


__all__ = [
    "__version__",
    "diff", "diff_sections", "DiffConfig",
    "patch",
    "UndiffableError", "EditScriptFormatError",
    ]

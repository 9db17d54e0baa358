# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Diffing of sectioned data, i.e. mappings from a section key to a list
of rows, as shown by a table view with multiple sections.
"""

from .generic import diff

__all__ = ["diff_sections"]


def diff_sections(before, after, is_same=None, is_equal=None, config=None):
    """Diff each section of two mappings of section -> sequence.

    Sections missing on one side are diffed against an empty list,
    so they show up as pure insertions or deletions. Returns a dict
    with the edit script of every section that changed.

    Raises UndiffableError if any section cannot be diffed, there
    is no partial result.
    """
    scripts = {}
    sections = list(before)
    sections.extend(s for s in after if s not in before)
    for section in sections:
        d = diff(before.get(section, []), after.get(section, []),
                 is_same=is_same, is_equal=is_equal, config=config)
        if d:
            scripts[section] = d
    return scripts

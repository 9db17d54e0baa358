# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from itertools import product

from rowdiff import patch, diff
from rowdiff.diff_format import count_ops, is_valid_edit_script, DiffOp


def all_sequences(alphabet, maxlen):
    "Yield all sequences over alphabet up to length maxlen, shortest first."
    for n in range(maxlen + 1):
        for seq in product(alphabet, repeat=n):
            yield list(seq)


def llcs(a, b):
    "Length of the longest common subsequence of a and b, by dynamic programming."
    R = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a)):
        for j in range(len(b)):
            if a[i] == b[j]:
                R[i+1][j+1] = R[i][j] + 1
            else:
                R[i+1][j+1] = max(R[i][j+1], R[i+1][j])
    return R[len(a)][len(b)]


def check_diff_and_patch(a, b):
    "Check that patch(a, b, diff(a,b)) reproduces b and the script is minimal."
    d = diff(a, b)
    assert is_valid_edit_script(d, len(a), len(b))
    counts = count_ops(d)
    assert counts[DiffOp.INSERT] - counts[DiffOp.DELETE] == len(b) - len(a)
    assert counts[DiffOp.INSERT] + counts[DiffOp.DELETE] == len(a) + len(b) - 2*llcs(a, b)
    assert patch(a, b, d) == b
    return d


def check_symmetric_diff_and_patch(a, b):
    "Check that diffing and patching works both ways."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)

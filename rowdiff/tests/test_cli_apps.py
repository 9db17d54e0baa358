# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import logging
import os

import pytest

import rowdiff
from rowdiff.__main__ import main_dispatch
from rowdiff.rowdiffapp import main_diff
from rowdiff.rowpatchapp import main_patch
from rowdiff.rowshowapp import main_show
from rowdiff import (
    rowdiffapp,
    rowpatchapp,
    rowshowapp,
)
from rowdiff.utils import EXPLICIT_MISSING_FILE, read_json


def test_rowdiff_app(filespath, capsys):
    afn = os.path.join(filespath, "people-before.json")
    bfn = os.path.join(filespath, "people-after.json")

    args = rowdiffapp._build_arg_parser().parse_args(
        [afn, bfn, '--id-key', 'id', '--no-color', '--log-level=WARN'])
    assert 0 == main_diff(args)
    assert args.log_level == 'WARN'
    assert rowdiff.log.logger.level == logging.WARN

    out, _ = capsys.readouterr()
    assert "deleted source[0]" in out
    assert "updated source[1]" in out
    assert "inserted target[2]" in out
    assert "Dmitri" in out


def test_rowdiff_app_no_changes(filespath, capsys):
    afn = os.path.join(filespath, "people-before.json")

    args = rowdiffapp._build_arg_parser().parse_args([afn, afn])
    assert 0 == main_diff(args)
    out, _ = capsys.readouterr()
    assert out == ""


def test_rowdiff_app_writes_script(filespath, tmpdir, edit_script_validator):
    afn = os.path.join(filespath, "people-before.json")
    bfn = os.path.join(filespath, "people-after.json")
    dfn = str(tmpdir.join("script.json"))

    args = rowdiffapp._build_arg_parser().parse_args(
        [afn, bfn, '--id-key', 'id', '--out', dfn])
    assert 0 == main_diff(args)

    script = read_json(dfn)
    edit_script_validator.validate(script)
    assert script == read_json(os.path.join(filespath, "people-script.json"))


def test_rowdiff_app_compare_fields(filespath, tmpdir):
    afn = os.path.join(filespath, "people-before.json")
    bfn = os.path.join(filespath, "people-after.json")
    dfn = str(tmpdir.join("script.json"))

    # The changed role is not compared, so nothing is updated
    assert 0 == rowdiffapp.main(
        [afn, bfn, '-k', 'id', '-f', 'name', '--out', dfn])
    assert read_json(dfn) == [
        {"op": "delete", "at": 0},
        {"op": "insert", "at": 2},
    ]


def test_rowdiff_app_null_file(filespath, tmpdir):
    fn = os.path.join(filespath, "people-before.json")
    dfn = str(tmpdir.join("script.json"))

    assert 0 == rowdiffapp.main([fn, EXPLICIT_MISSING_FILE, '--out', dfn])
    assert [e["op"] for e in read_json(dfn)] == ["delete"] * 3

    assert 0 == rowdiffapp.main([EXPLICIT_MISSING_FILE, fn, '--out', dfn])
    assert read_json(dfn) == [{"op": "insert", "at": j} for j in range(3)]


def test_rowdiff_app_missing_file(filespath, caplog):
    fn = os.path.join(filespath, "people-before.json")
    missing = os.path.join(filespath, "does-not-exist.json")
    assert 1 == rowdiffapp.main([fn, missing])
    assert "Missing file" in caplog.text


def test_rowdiff_app_not_a_list(filespath, caplog):
    afn = os.path.join(filespath, "people-before.json")
    bfn = os.path.join(filespath, "not-a-list.json")
    assert 1 == rowdiffapp.main([afn, bfn])
    assert "Could not read sequences" in caplog.text


def test_rowdiff_app_undiffable(filespath, caplog):
    afn = os.path.join(filespath, "people-missing-id.json")
    bfn = os.path.join(filespath, "people-after.json")
    assert 1 == rowdiffapp.main([afn, bfn, '--id-key', 'id'])
    assert "Cannot diff" in caplog.text


def test_rowdiff_app_undiffable_not_strict(filespath, tmpdir):
    afn = os.path.join(filespath, "people-missing-id.json")
    bfn = os.path.join(filespath, "people-after.json")
    dfn = str(tmpdir.join("script.json"))
    assert 0 == rowdiffapp.main(
        [afn, bfn, '--id-key', 'id', '--no-strict', '--out', dfn])
    # Item without id matches nothing
    assert read_json(dfn) == [
        {"op": "update", "at": 0},
        {"op": "delete", "at": 1},
        {"op": "insert", "at": 1},
        {"op": "insert", "at": 2},
    ]


def test_rowpatch_app(filespath, capsys):
    afn = os.path.join(filespath, "people-before.json")
    bfn = os.path.join(filespath, "people-after.json")
    dfn = os.path.join(filespath, "people-script.json")

    args = rowpatchapp._build_arg_parser().parse_args([afn, bfn, dfn])
    assert 0 == main_patch(args)
    out, _ = capsys.readouterr()
    assert json.loads(out) == read_json(bfn)


def test_rowpatch_app_output(filespath, tmpdir):
    afn = os.path.join(filespath, "people-before.json")
    bfn = os.path.join(filespath, "people-after.json")
    dfn = os.path.join(filespath, "people-script.json")
    ofn = str(tmpdir.join("patched.json"))

    assert 0 == rowpatchapp.main([afn, bfn, dfn, '-o', ofn])
    assert read_json(ofn) == read_json(bfn)


def test_rowpatch_app_bad_script(filespath, caplog):
    afn = os.path.join(filespath, "people-before.json")
    bfn = os.path.join(filespath, "people-after.json")
    dfn = os.path.join(filespath, "bad-script.json")
    assert 1 == rowpatchapp.main([afn, bfn, dfn])
    assert "Invalid edit script" in caplog.text


def test_rowpatch_app_script_out_of_range(filespath, caplog):
    afn = os.path.join(filespath, "people-before.json")
    dfn = os.path.join(filespath, "people-script.json")
    # Script indices do not fit an empty target
    assert 1 == rowpatchapp.main([afn, EXPLICIT_MISSING_FILE, dfn])
    assert "Invalid edit script" in caplog.text


def test_rowshow_app(filespath, capsys):
    afn = os.path.join(filespath, "people-before.json")
    bfn = os.path.join(filespath, "people-after.json")
    dfn = os.path.join(filespath, "people-script.json")

    args = rowshowapp._build_arg_parser().parse_args(
        [dfn, '-s', afn, '-t', bfn, '--no-color', '--log-level=CRITICAL'])
    assert 0 == main_show(args)
    assert args.log_level == 'CRITICAL'
    assert rowdiff.log.logger.level == logging.CRITICAL

    out, _ = capsys.readouterr()
    assert "## deleted source[0]:" in out
    assert "-  {'id': 1, 'name': 'Ada', 'role': 'admin'}" in out
    assert "## inserted target[2]:" in out


def test_rowshow_app_script_only(filespath, capsys):
    dfn = os.path.join(filespath, "people-script.json")
    assert 0 == rowshowapp.main([dfn, '--no-color'])
    out, _ = capsys.readouterr()
    assert out == (
        "## deleted source[0]:\n\n"
        "## updated source[1]:\n\n"
        "## inserted target[2]:\n\n"
    )


def test_rowshow_app_invalid_lengths(filespath, caplog):
    dfn = os.path.join(filespath, "people-script.json")
    # Deleting source[0] is out of range for an empty source
    assert 1 == rowshowapp.main([dfn, "-s", EXPLICIT_MISSING_FILE])
    assert "Invalid edit script" in caplog.text


def test_main_dispatch_diff(filespath, tmpdir):
    afn = os.path.join(filespath, "people-before.json")
    bfn = os.path.join(filespath, "people-after.json")
    dfn = str(tmpdir.join("script.json"))
    assert 0 == main_dispatch(['diff', afn, bfn, '-k', 'id', '--out', dfn])
    assert len(read_json(dfn)) == 3


def test_main_dispatch_version(capsys):
    with pytest.raises(SystemExit) as e:
        main_dispatch(['--version'])
    assert e.value.code == rowdiff.__version__


def test_main_dispatch_unknown_command():
    with pytest.raises(SystemExit) as e:
        main_dispatch(['frobnicate'])
    assert "Unrecognized command 'frobnicate'" in e.value.code


def test_main_dispatch_missing_command():
    with pytest.raises(SystemExit) as e:
        main_dispatch([])
    assert "Option missing" in e.value.code


def test_main_dispatch_config(capsys):
    with pytest.raises(SystemExit) as e:
        main_dispatch(['--config'])
    assert e.value.code == 1
    _, err = capsys.readouterr()
    assert "RowDiff:" in err
    assert "RowPatch:" in err
    assert "id_key" in err

# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from rowdiff.profiling import timer


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def json_schema_edit_script(request):
    schema_path = os.path.join(schema_dir, 'edit_script.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def edit_script_validator(request, json_schema_edit_script):
    return Validator(json_schema_edit_script)


@fixture
def enabled_timer():
    timer.reset()
    with timer.enable():
        yield timer
    timer.reset()

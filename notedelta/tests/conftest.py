# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip

from notedelta import DictRecordLoader, ElementType, new_record
from notedelta.config import reset_config


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(autouse=True)
def default_config():
    reset_config()
    yield
    reset_config()
    logging.getLogger('notedelta').setLevel(logging.NOTSET)


@fixture(scope='session')
def json_schema_record(request):
    schema_path = os.path.join(schema_dir, 'record.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def record_validator(request, json_schema_record):
    return Validator(json_schema_record)


class CountingLoader(DictRecordLoader):
    "Loader remembering every id it was asked for."

    def __init__(self, records=None):
        super(CountingLoader, self).__init__(records)
        self.calls = []

    def resolve(self, id):
        self.calls.append(id)
        return super(CountingLoader, self).resolve(id)


@fixture
def loader():
    return CountingLoader([
        new_record("1", "root", ElementType.ANY, "topic", ["2", "3"]),
        new_record("2", "first", ElementType.NAME, "", []),
        new_record("3", "second", ElementType.OCCURRENCE, "definition", []),
        new_record("topic", "Topic", ElementType.ANY, "", []),
        new_record("definition", "Definition", ElementType.ANY, "", []),
    ])

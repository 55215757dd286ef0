"""Tests for the task UUID URL converter."""

import re
import uuid

from task_service.converters import TaskUidConverter


SAMPLE = uuid.UUID("9f1c2a4e-5b6d-4e7f-8a9b-0c1d2e3f4a5b")


def _matches(value):
    return re.fullmatch(TaskUidConverter.regex, value) is not None


def test_matches_hyphenated_and_simple_forms():
    assert _matches(str(SAMPLE))
    assert _matches(SAMPLE.hex)
    assert _matches(str(SAMPLE).upper())


def test_rejects_other_strings():
    assert not _matches("123")
    assert not _matches(SAMPLE.hex[:-1])
    assert not _matches("{" + str(SAMPLE) + "}")
    assert not _matches("g" * 32)


def test_both_forms_resolve_to_same_uuid(app):
    converter = TaskUidConverter(app.url_map)

    assert converter.to_python(SAMPLE.hex) == SAMPLE
    assert converter.to_python(str(SAMPLE)) == SAMPLE
    assert converter.to_url(SAMPLE) == str(SAMPLE)

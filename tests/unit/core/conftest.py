"""Shared fixtures for core unit tests"""

import pytest

from mdprose.core.parse import parse_text


SAMPLE_MD = """\
# Chapter One

Some **bold** prose with a [link](http://example.com).

<!-- ::comment:: reviewer notes that should not count -->

## Scene

- first item
- second item

<!-- ::break:: -->

After the break.

# Bibliography <!-- ::auto-bibliography:: -->

Smith, J. 2020.
"""

SAMPLE_FM_MD = """\
---
title: Test Doc
goal: 500
---

# Title

Body content here.
"""


@pytest.fixture(name="sample_doc")
def sample_doc_fixture():
    return parse_text(SAMPLE_MD)


@pytest.fixture(name="sample_fm_md")
def sample_fm_md_fixture():
    return SAMPLE_FM_MD

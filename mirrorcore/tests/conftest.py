"""Shared fixtures: every test runs against an empty declaration store."""

import pytest

from mirrorcore.mirrors import reset_declaration_store


@pytest.fixture(autouse=True)
def clean_store():
    reset_declaration_store()
    yield
    reset_declaration_store()

"""Shared fixtures for mailman tests."""

import pytest

from events import EventBus
from fakes import make_fake_registry, make_template
from metadata import MetadataService
from model import MergeTemplateContainer


@pytest.fixture
def bus():
    """A fresh event bus."""
    return EventBus()


@pytest.fixture
def fake_registry():
    """CardRegistry of in-memory cards, one per CardName."""
    return make_fake_registry()


@pytest.fixture
def metadata():
    """MetadataService with no recorded runs."""
    return MetadataService()


@pytest.fixture
def sample_template():
    """A complete template with no conditional."""
    return make_template("Campaign A")


@pytest.fixture
def conditional_template():
    """A complete template that only sends when a column is true."""
    return make_template("Campaign B", conditional="<<Ready>>")


@pytest.fixture
def three_templates():
    """Three distinct templates, in order."""
    return [make_template("First"), make_template("Second"), make_template("Third")]


@pytest.fixture
def container(bus, three_templates):
    """MergeTemplateContainer holding three_templates."""
    return MergeTemplateContainer(bus, three_templates)

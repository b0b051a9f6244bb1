import pytest

from tests.helpers import StaticFetcher

ITEMS_XML = """<root>
  <item id="1">First</item>
  <item id="2">Second</item>
  <item id="3">Third</item>
</root>"""

PEOPLE_XML = """<people>
  <person age="25">Alice</person>
  <person age="17">Bob</person>
  <person age="32">Charlie</person>
</people>"""


@pytest.fixture
def items_xml():
    return ITEMS_XML


@pytest.fixture
def people_xml():
    return PEOPLE_XML


@pytest.fixture
def static_fetcher():
    return StaticFetcher()

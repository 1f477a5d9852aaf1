"""Shared pytest fixtures for the full texthelpers test suite."""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger
import pytest

LOREM_TEXT = (
    "Far far away, behind the word mountains, far from the countries Vokalia and "
    "Consonantia, there live the blind texts. Separated they live in Bookmarksgrove "
    "right at the coast of the Semantics, a large language ocean.\n"
    "A small river named Duden flows by their place and supplies it with the "
    "necessary regelialia. It is a paradisematic country, in which roasted parts of "
    "sentences fly into your mouth.\n"
    "Even the all-powerful Pointing has no control about the blind texts it is an "
    "almost unorthographic life One day however a small line of blind text by the "
    "name of Lorem Ipsum decided to leave for the far World of Grammar."
)

LOREM_HTML = (
    "<p>Far far away, behind the word mountains, far from the countries "
    "<strong>Vokalia</strong> and <strong>Consonantia</strong>, there live the blind "
    "texts. Separated they live in <i>Bookmarksgrove</i> right at the coast of the "
    "Semantics, a large language ocean.</p>\n"
    "<p>A small river named <span class='active'>Duden</span> flows by their place "
    "and supplies it with the necessary regelialia. It is a paradisematic country, in "
    "which roasted parts of sentences fly into your mouth.</p>\n"
    "<p>Even the all-powerful Pointing has no control about the blind texts it is an "
    "almost unorthographic life One day however a small line of blind text by the "
    "name of Lorem Ipsum decided to leave for the far World of Grammar.</p>"
)


@pytest.fixture(autouse=True)
def _reset_package_logging() -> Iterator[None]:
    """Restore silent package logging after tests that configure loguru sinks."""

    yield
    logger.remove()
    logger.disable("texthelpers")


@pytest.fixture
def lorem_text() -> str:
    """Provide a three-line plain-text sample longer than 500 characters."""

    return LOREM_TEXT


@pytest.fixture
def lorem_html() -> str:
    """Provide the HTML paragraph rendition of `lorem_text`."""

    return LOREM_HTML

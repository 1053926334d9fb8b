"""Pytest configuration and fixtures."""

import hashlib
import os
import pathlib
from typing import Dict, List, Optional, Union

import aiohttp
import pytest
import vcr

from glosbe_lookup.config import API_URL, DEST_LANG, PAGE_URL, SOURCE_LANG
from glosbe_lookup.models import FetchResponse

# Calculate hash of rules.py for cassette invalidation
RULES_HASH = hashlib.sha256(
    (pathlib.Path(__file__).parent.parent / "glosbe_lookup" / "rules.py").read_bytes()
).hexdigest()[:8]


def cassette(name: str) -> str:
    """Generate cassette filename with rules hash."""
    return f"fixtures/{name}_{RULES_HASH}.yaml"


@pytest.fixture
def my_vcr():
    """VCR fixture for recording/replaying HTTP interactions."""
    return vcr.VCR(
        cassette_library_dir="tests",
        filter_headers=[("user-agent", "DUMMY")],
        record_mode="once",
    )


def live_guard():
    """Check if live testing is enabled."""
    if not os.getenv("GLOSBE_LIVE"):
        pytest.skip("Live lookups disabled (set GLOSBE_LIVE=1)")


class FakeNetwork:
    """Network capability answering from a prefix -> response table.

    A value may be a FetchResponse or an exception instance to raise.
    """

    def __init__(self, routes: Optional[Dict[str, Union[FetchResponse, Exception]]] = None):
        self.routes = routes or {}
        self.calls: List[str] = []

    async def get(self, url: str) -> FetchResponse:
        self.calls.append(url)
        for prefix, answer in self.routes.items():
            if url.startswith(prefix):
                if isinstance(answer, Exception):
                    raise answer
                return answer
        raise aiohttp.ClientConnectionError(f"no route for {url}")


API_PREFIX = API_URL
PAGE_PREFIX = PAGE_URL.format(source=SOURCE_LANG, dest=DEST_LANG, phrase="")


@pytest.fixture
def sample_words():
    """Sample Lao words for testing."""
    return ["ແມວ", "ໝາ", "ນ້ຳ"]

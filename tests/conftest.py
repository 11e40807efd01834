from __future__ import annotations

from collections.abc import Iterator

import pytest

from markdown_tree_sitter import registry


@pytest.fixture(autouse=True)
def _clean_registry() -> Iterator[None]:
    registry.reset_registry()
    yield
    registry.reset_registry()

"""Shared pytest fixtures for Pagewright tests."""

from pathlib import Path

import pytest

from pagewright.runtime.expander import build_node
from pagewright.runtime.page_model import PageModel
from pagewright.specs.component import ComponentNode


@pytest.fixture
def page() -> PageModel:
    """Return an empty page model with default layout and design."""
    return PageModel()


@pytest.fixture
def saas_page() -> PageModel:
    """Return a page seeded from the SaaS template."""
    model = PageModel()
    model.instantiate_template("template-saas")
    return model


@pytest.fixture
def faq_node() -> ComponentNode:
    """Return a FAQ node with default props."""
    return build_node("faq")


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return a project directory containing a pagewright.toml."""
    (tmp_path / "pagewright.toml").write_text(
        """
[project]
name = "acme-landing"
title = "Acme"

[layout]
max_width = "max-w-5xl"
show_border = true

[design]
theme = "blue"
mode = "light"
radius = 0.75

[export]
filename = "index.html"
""",
        encoding="utf-8",
    )
    return tmp_path

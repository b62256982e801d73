"""Pytest configuration and fixtures."""

import pytest

from faas_cli.core.template_store import TemplateInfo, encode_templates


@pytest.fixture
def store_templates() -> list[TemplateInfo]:
    """A small store in store order, spanning all three platforms."""
    return [
        TemplateInfo(
            name="python3-flask",
            platform="x86_64",
            language="python3",
            source="openfaas",
            description="Python 3 Flask template",
            repository="https://github.com/openfaas/python-flask-template",
            official="true",
        ),
        TemplateInfo(
            name="python3-flask-arm64",
            platform="arm64",
            language="python3",
            source="openfaas",
            description="Python 3 Flask template for arm64",
            repository="https://github.com/openfaas/python-flask-template",
            official="true",
        ),
        TemplateInfo(
            name="golang-http-armhf",
            platform="armhf",
            language="go",
            source="openfaas",
            description="Golang HTTP template for armhf",
            repository="https://github.com/openfaas/golang-http-template",
            official="true",
        ),
        TemplateInfo(
            name="rust",
            platform="arm64",
            language="rust",
            source="booyaa",
            description="Rust template",
            repository="https://github.com/booyaa/openfaas-rust-template",
            official="false",
        ),
    ]


@pytest.fixture
def store_document(store_templates: list[TemplateInfo]) -> bytes:
    """store_templates encoded the way the store serves them."""
    return encode_templates(store_templates)

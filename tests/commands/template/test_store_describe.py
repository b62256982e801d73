"""Tests for `faas-cli template store describe`."""

from click.testing import CliRunner

from faas_cli.cli.cli import cli
from faas_cli.core.config import DEFAULT_TEMPLATES_STORE, StoreConfig
from faas_cli.core.context import FaasContext
from faas_cli.core.template_store import FakeTemplateStore, TransportError

ENV_URL = "https://env.example.com/templates.json"


def test_describe_prints_all_fields(store_document: bytes) -> None:
    store = FakeTemplateStore(documents={DEFAULT_TEMPLATES_STORE: store_document})
    ctx = FaasContext.for_test(template_store=store)

    result = CliRunner().invoke(
        cli, ["template", "store", "describe", "golang-http-armhf"], obj=ctx
    )

    assert result.exit_code == 0
    assert result.stdout == (
        "\n"
        "Name:              golang-http-armhf\n"
        "Platform:          armhf\n"
        "Language:          go\n"
        "Source:            openfaas\n"
        "Description:       Golang HTTP template for armhf\n"
        "Repository:        https://github.com/openfaas/golang-http-template\n"
        "Official Template: true\n"
        "\n"
    )


def test_describe_unknown_template_fails(store_document: bytes) -> None:
    store = FakeTemplateStore(documents={DEFAULT_TEMPLATES_STORE: store_document})
    ctx = FaasContext.for_test(template_store=store)

    result = CliRunner().invoke(cli, ["template", "store", "describe", "cobol"], obj=ctx)

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "template with name: `cobol` does not exist in the repository" in result.stderr


def test_describe_uses_environment_store(store_document: bytes) -> None:
    store = FakeTemplateStore(documents={ENV_URL: store_document})
    ctx = FaasContext.for_test(
        template_store=store, store_config=StoreConfig(store_url=ENV_URL)
    )

    result = CliRunner().invoke(cli, ["template", "store", "describe", "rust"], obj=ctx)

    assert result.exit_code == 0
    assert store.fetched_urls == [ENV_URL]
    assert "booyaa" in result.stdout


def test_describe_fetch_failure() -> None:
    store = FakeTemplateStore(error=TransportError("connection refused", is_timeout=False))
    ctx = FaasContext.for_test(template_store=store)

    result = CliRunner().invoke(cli, ["template", "store", "describe", "rust"], obj=ctx)

    assert result.exit_code == 1
    assert "error while getting templates info: " in result.stderr

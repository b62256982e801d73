"""Application context with dependency injection."""

from dataclasses import dataclass

from faas_cli.core.config import StoreConfig
from faas_cli.core.template_store.abc import TemplateStore
from faas_cli.core.template_store.fake import FakeTemplateStore
from faas_cli.core.template_store.real import RealTemplateStore


@dataclass(frozen=True)
class FaasContext:
    """Immutable context holding all dependencies for CLI commands.

    Created at the CLI entry point and passed to commands through click's
    `obj`. Tests build one with for_test() and pass it as `obj=`.
    """

    template_store: TemplateStore
    store_config: StoreConfig

    @classmethod
    def for_test(
        cls,
        *,
        template_store: TemplateStore | None = None,
        store_config: StoreConfig | None = None,
    ) -> "FaasContext":
        """Create a test context with fake implementations.

        Args:
            template_store: Store integration; defaults to an empty FakeTemplateStore
            store_config: Environment layer; defaults to no URL override

        Returns:
            FaasContext that never touches the network or os.environ
        """
        return cls(
            template_store=template_store if template_store is not None else FakeTemplateStore(),
            store_config=store_config if store_config is not None else StoreConfig(store_url=""),
        )


def create_context() -> FaasContext:
    """Create production context with real implementations."""
    return FaasContext(
        template_store=RealTemplateStore(),
        store_config=StoreConfig.from_env(),
    )

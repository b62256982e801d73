"""In-memory fake implementation of TemplateStore for testing."""

from faas_cli.core.template_store.abc import TemplateStore
from faas_cli.core.template_store.errors import TemplateStoreError, UnexpectedStatusError


class FakeTemplateStore(TemplateStore):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.
    This class has NO public setup methods.
    """

    def __init__(
        self,
        *,
        documents: dict[str, bytes] | None = None,
        error: TemplateStoreError | None = None,
    ) -> None:
        """Create FakeTemplateStore with pre-configured store documents.

        Args:
            documents: Mapping of URL -> body returned by fetch(). URLs not in
                the mapping behave like a store answering 404.
            error: If set, fetch() raises this error for every URL
        """
        self._documents = documents or {}
        self._error = error
        self._fetched_urls: list[str] = []

    @property
    def fetched_urls(self) -> list[str]:
        """Read-only access to fetched URLs for test assertions."""
        return self._fetched_urls.copy()

    def fetch(self, url: str) -> bytes:
        self._fetched_urls.append(url)

        if self._error is not None:
            raise self._error

        if url not in self._documents:
            raise UnexpectedStatusError(wanted=200, got=404)
        return self._documents[url]

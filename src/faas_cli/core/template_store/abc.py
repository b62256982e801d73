"""Abstract base class for template store access."""

from abc import ABC, abstractmethod


class TemplateStore(ABC):
    """Abstract interface for fetching a template store document.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def fetch(self, url: str) -> bytes:
        """Fetch the raw store document.

        Args:
            url: Store URL to GET

        Returns:
            The complete, non-empty response body

        Raises:
            RequestConstructionError: If url is not a usable request target
            TransportError: On network failure or timeout
            UnexpectedStatusError: If the response status is not 200
            EmptyBodyError: If the response has no body
            BodyReadError: If reading the body fails
        """
        ...

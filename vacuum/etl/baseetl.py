from abc import ABC, abstractmethod
from typing import Any, TypeVar, Generic

import httpx

from vacuum.config import Settings
from vacuum.errors import DeserializeError
from vacuum.logging_config import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class BaseETL(ABC, Generic[T]):
    name: str

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.transport = transport

    def extract(self, url: str) -> dict[str, Any]:
        logger.debug("fetching", etl=self.name, url=url)

        # Fetch Data from API (synchronously)
        with httpx.Client(timeout=self.settings.timeout, transport=self.transport) as client:
            response = client.get(url)
            response.raise_for_status()
            try:
                data = response.json()
            except ValueError as e:
                raise DeserializeError("payload", f"invalid JSON body: {e}") from e

        logger.debug("fetched", etl=self.name, status=response.status_code)
        return data

    @abstractmethod
    def transform(self, raw_data: dict[str, Any]) -> T:
        """Turn the raw payload into entities"""
        pass

    @abstractmethod
    def load(self, transformed_data: T) -> None:
        """Deliver entities to their destination"""
        pass

from abc import ABC, abstractmethod
from typing import Any


class JobSearchBase(ABC):
    name: str = "base"

    @abstractmethod
    def fetch(self, country: str, where: str, page: int = 1, what: str = "") -> list[dict[str, Any]]:
        """Raw provider-shaped listings for one results page."""

"""Interfaces of the external collaborators used to resolve a track"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SearchResult:
    identifier: str
    title: str
    thumbnail: str
    owner_name: str


class ISearchService(ABC):

    @abstractmethod
    async def search(self, query: str) -> Optional[SearchResult]:
        """Return the top-ranked match for the query, or None if there is none."""
        pass


class IAudioResolver(ABC):

    @abstractmethod
    async def resolve_audio(self, watch_url: str) -> str:
        """Return a directly playable audio-only URL for the watch URL.

        Raises ResolutionFailed when no audio-only encoding can be produced.
        """
        pass

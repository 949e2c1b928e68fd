"""
The ring of links and its neighbour algebra.

A ring is an ordered list of links read as a circle: the successor of the
last link is the first, the predecessor of the first is the last. Rings are
small (tens of entries) so every lookup is a plain linear scan.
"""

from typing import Callable, Iterator, List, Mapping, Tuple

from pydantic import ConfigDict, Field, RootModel

from webring.link import Link


class Ring(RootModel[List[Link]]):
    """An ordered, circular sequence of links."""
    model_config = ConfigDict(frozen=True)

    root: List[Link] = Field(default_factory=list)

    def __iter__(self) -> Iterator[Link]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Link:
        return self.root[index]

    def __contains__(self, link: object) -> bool:
        return link in self.root

    def filter(self, predicate: Callable[[Link], bool]) -> "Ring":
        """Return a new ring holding the links accepted by predicate, in ring order."""
        return Ring([link for link in self.root if predicate(link)])

    def exclude_anomalies(self, anomalies: Mapping[str, object]) -> "Ring":
        """
        Return a new ring without the links listed in anomalies.

        Anomalies are keyed by address, so a link whose name changed is still
        excluded as long as its address matches.
        """
        return self.filter(lambda link: link.link not in anomalies)

    def index_of(self, link: Link) -> int:
        """Position of the first link equal to link, or -1 if absent."""
        for i, candidate in enumerate(self.root):
            if candidate == link:
                return i
        return -1

    def surrounding_links(self, link: Link) -> Tuple[Link, Link]:
        """
        Return the (previous, next) links around the first occurrence of link.

        Returns a pair of empty links if link is not in the ring.
        """
        i = self.index_of(link)
        if i < 0:
            return Link(), Link()
        return self.surrounding_index(i)

    def surrounding_index(self, i: int) -> Tuple[Link, Link]:
        """
        Return the (previous, next) links around position i.

        Args:
            i: Position in the ring. Negative positions do not wrap around.

        Returns:
            The neighbouring links, wrapping at both ends of the ring. A ring
            of one link is its own neighbour on both sides. If the ring is
            empty or i is out of bounds, a pair of empty links.
        """
        n = len(self.root)
        if n == 0 or i < 0 or i >= n:
            return Link(), Link()

        prev = self.root[i - 1] if i > 0 else self.root[n - 1]
        next_ = self.root[i + 1] if i < n - 1 else self.root[0]
        return prev, next_

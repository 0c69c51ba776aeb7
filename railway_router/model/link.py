"""Link - Weighted undirected railroad segment between two stations.

A Link connects two distinct stations. Direction does not matter:
Link("A", "B", 3) and Link("B", "A", 3) describe the same railroad.
"""

from dataclasses import dataclass

from railway_router.constants import LinkConfig


def make_link_key(a: str, b: str) -> str:
    """Canonical key for an unordered station pair (e.g. "A-B")."""
    return LinkConfig.KEY_SEPARATOR.join(sorted((a, b)))


@dataclass(frozen=True)
class Link:
    """A railroad between two stations.

    Attributes:
        a: First station ID (as entered by the user)
        b: Second station ID
        weight: Positive integer travel cost

    Example:
        link = Link(a="B", b="A", weight=4)
        link.key          # "A-B"
        link.other("A")   # "B"
    """

    a: str
    b: str
    weight: int

    @property
    def key(self) -> str:
        """Order-independent identity of the station pair."""
        return make_link_key(self.a, self.b)

    @property
    def stations(self) -> tuple[str, str]:
        return (self.a, self.b)

    def connects(self, a: str, b: str) -> bool:
        """True if this link joins a and b, in either order."""
        return {self.a, self.b} == {a, b}

    def touches(self, station: str) -> bool:
        return station in (self.a, self.b)

    def other(self, station: str) -> str:
        """Return the station at the far end of the link from `station`."""
        if station == self.a:
            return self.b
        if station == self.b:
            return self.a
        raise ValueError(f"Station '{station}' is not an endpoint of link {self.key}")

    def with_weight(self, weight: int) -> "Link":
        """Copy of this link with a new weight (endpoints kept as entered)."""
        return Link(a=self.a, b=self.b, weight=weight)

    def __str__(self) -> str:
        return f"{self.a} - {self.b} ({self.weight})"

"""Species definitions."""

from dataclasses import dataclass

Name = str
Count = int


@dataclass
class Species:
    """Dataclass for a single species and its initial count."""

    name: Name
    count: Count = 0

    def __str__(self):  # noqa
        return f"{self.name} ({self.count})"

    def __repr__(self):  # noqa
        return f"Species({self.name}, {self.count})"

    def __eq__(self, other):  # noqa
        if isinstance(other, Species):
            return self.name == other.name
        elif isinstance(other, str):
            return self.name == other
        return False

    def __hash__(self):
        """Hashes the name of this species."""
        return hash(self.name)

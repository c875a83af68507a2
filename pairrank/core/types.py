"""
Core data model for PairRank.

Entities are rated participants with a stable index. Pairs are unordered
comparison units between two distinct entities. Observations record the
answered ratio of one comparison and feed the linear system.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from pairrank.core.constants import DEFAULT_ATTRIBUTE


@dataclass(frozen=True)
class Entity:
    """
    A rated participant.

    Attributes:
        index: Stable position of the entity in its roster (0..N-1)
        name: Display name, owned by the caller
        is_goalie: Whether the entity belongs to the goalie subset
    """
    index: int
    name: str
    is_goalie: bool = False

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False)
class Pair:
    """
    Unordered combination of two distinct entity indices.

    `first` and `second` keep the asking orientation (the ratio answered
    for a pair means "first is ratio times better than second"), but
    equality and hashing ignore it.
    """
    first: int
    second: int

    def __post_init__(self):
        if self.first == self.second:
            raise ValueError(f"Pair cannot reference entity {self.first} twice")
        if self.first < 0 or self.second < 0:
            raise ValueError(f"Pair indices must be non-negative: {self.first}, {self.second}")

    @property
    def key(self) -> frozenset:
        return frozenset((self.first, self.second))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __iter__(self):
        yield self.first
        yield self.second

    def __repr__(self) -> str:
        return f"Pair({self.first}, {self.second})"

    def contains(self, entity: int) -> bool:
        """Whether the pair touches the given entity index."""
        return entity == self.first or entity == self.second

    def other(self, entity: int) -> int:
        """Return the endpoint that is not `entity`."""
        if entity == self.first:
            return self.second
        if entity == self.second:
            return self.first
        raise ValueError(f"Entity {entity} is not part of {self!r}")

    def reversed(self) -> "Pair":
        return Pair(self.second, self.first)


@dataclass(frozen=True)
class Observation:
    """
    Answered comparison: `left` is `ratio` times better than `right`.

    Dimensions select which rated attribute of each side is compared.
    A self-comparison has `left == right` and differing dimensions
    (e.g. an entity's attack against its own defense).
    """
    left: int
    right: int
    ratio: float
    left_dimension: int = 0
    right_dimension: int = 0

    def __post_init__(self):
        if not math.isfinite(self.ratio) or self.ratio <= 0:
            raise ValueError(f"Observation ratio must be finite and positive, got {self.ratio}")
        if self.left == self.right and self.left_dimension == self.right_dimension:
            raise ValueError(f"Observation compares entity {self.left} with itself")

    @property
    def is_self_comparison(self) -> bool:
        return self.left == self.right

    @classmethod
    def from_pair(cls, pair: Pair, ratio: float, dimension: int = 0) -> "Observation":
        """Observation for an answered pair within one dimension."""
        return cls(pair.first, pair.second, ratio, dimension, dimension)


class ResponseKind(str, Enum):
    """Kinds of answer a response collector can give."""
    VALUE = "value"
    SKIP = "skip"
    QUIT = "quit"


@dataclass(frozen=True)
class Response:
    """Answer to a single comparison prompt."""
    kind: ResponseKind
    ratio: Optional[float] = None

    def __post_init__(self):
        if self.kind == ResponseKind.VALUE:
            if self.ratio is None or not math.isfinite(self.ratio) or self.ratio <= 0:
                raise ValueError(f"Response ratio must be finite and positive, got {self.ratio}")
        elif self.ratio is not None:
            raise ValueError(f"{self.kind.value} response cannot carry a ratio")

    @classmethod
    def value(cls, ratio: float) -> "Response":
        return cls(ResponseKind.VALUE, float(ratio))

    @classmethod
    def skip(cls) -> "Response":
        return cls(ResponseKind.SKIP)

    @classmethod
    def quit(cls) -> "Response":
        return cls(ResponseKind.QUIT)

    @property
    def is_value(self) -> bool:
        return self.kind == ResponseKind.VALUE

    @property
    def is_skip(self) -> bool:
        return self.kind == ResponseKind.SKIP

    @property
    def is_quit(self) -> bool:
        return self.kind == ResponseKind.QUIT


@dataclass
class RatingVector:
    """
    One rating per entity, normalized so the anchor's value is 1.

    Attributes:
        entities: Rated entities, in input order
        values: Rating of each entity (same order as `entities`)
        anchor: Reference entity
        attribute: Name of the rated attribute
    """
    entities: List[Entity]
    values: List[float]
    anchor: Entity
    attribute: str = DEFAULT_ATTRIBUTE
    _positions: Dict[Entity, int] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.entities) != len(self.values):
            raise ValueError(
                f"Got {len(self.values)} values for {len(self.entities)} entities"
            )
        self.values = [float(v) for v in self.values]
        self._positions = {e: i for i, e in enumerate(self.entities)}

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, key: Union[Entity, str, int]) -> float:
        """Look up a rating by entity, display name, or position."""
        if isinstance(key, Entity):
            return self.values[self._positions[key]]
        if isinstance(key, str):
            for entity, value in zip(self.entities, self.values):
                if entity.name == key:
                    return value
            raise KeyError(key)
        return self.values[key]

    def as_dict(self) -> Dict[str, float]:
        """Ratings keyed by entity name."""
        return {e.name: v for e, v in zip(self.entities, self.values)}

    def ranked(self) -> List[Tuple[Entity, float]]:
        """Entities sorted from highest to lowest rating."""
        return sorted(zip(self.entities, self.values), key=lambda item: -item[1])

    @property
    def anchor_value(self) -> float:
        return self[self.anchor]

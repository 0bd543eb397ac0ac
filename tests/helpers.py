"""Key types shared by the adaptivemap tests."""

from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class CollidingKey:
    """Key whose hash is pinned to ``slot`` so tests can force collisions."""

    value: int
    slot: int = field(default=0, compare=False)

    def __hash__(self) -> int:
        return self.slot

    def __repr__(self) -> str:
        return f"CK({self.value})"

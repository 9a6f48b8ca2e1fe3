"""Factory method: pick the concrete class from an input value."""

from dataclasses import dataclass

from pattern_demos.patterns.registry import register


@dataclass(frozen=True)
class ChessPiece:
    rank: str


@dataclass(frozen=True)
class Pawn(ChessPiece):
    pass


@dataclass(frozen=True)
class Queen(ChessPiece):
    pass


def create_piece(rank: str) -> ChessPiece:
    if rank == "q":
        return Queen(rank)
    if rank == "p":
        return Pawn(rank)
    raise ValueError(f"Unknown piece: {rank}")


@register(name="factory-method", description="Create chess pieces from their rank letter")
def demo():
    for rank in "qp":
        print(create_piece(rank))
    try:
        create_piece("x")
    except ValueError as e:
        print(f"rejected: {e}")

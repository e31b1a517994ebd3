"""Representation families — образы генераторов a, b в SL(2, C)."""

from .generators import (
    DEFAULT_REPRESENTATION,
    REPRESENTATIONS,
    GeneratorImages,
    Representation,
    SqrtPairRepresentation,
    TrivialRepresentation,
    get_representation,
)

__all__ = [
    "DEFAULT_REPRESENTATION",
    "REPRESENTATIONS",
    "GeneratorImages",
    "Representation",
    "SqrtPairRepresentation",
    "TrivialRepresentation",
    "get_representation",
]

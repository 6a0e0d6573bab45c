"""A small animal hierarchy: cats and dogs with breeds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["Animal", "CatBreed", "Cat", "DogBreed", "Dog"]


@dataclass
class Animal:
    """An animal with an age and a weight."""

    age: int = 0
    weight: int = 1

    def sound(self) -> str:
        """Return the noise this animal makes."""
        return "[Animal] Some Noise ..."


class CatBreed(Enum):
    KOREANSHORT = 0
    MUNCHKIN = 1
    RUSSIANBLUE = 2
    TURKISHANGORA = 3


class DogBreed(Enum):
    RETRIEVER = 0
    HUSKY = 1
    SHIBA = 2
    JINDOTGAE = 3


@dataclass
class Cat(Animal):
    """A cat; Korean shorthair unless told otherwise."""

    breed: CatBreed = CatBreed.KOREANSHORT

    def groom(self) -> str:
        """Return what the cat does while grooming."""
        return "Grooming..."


@dataclass
class Dog(Animal):
    """A dog; retriever unless told otherwise."""

    breed: DogBreed = DogBreed.RETRIEVER

    def bark(self) -> str:
        """Return the dog's bark."""
        return "Woof Woof!"
from dataclasses import dataclass


@dataclass
class Car:
    brand: str
    model: str
    year: int


@dataclass
class Joke:
    id: int
    text: str


def make_cars() -> list[Car]:
    return [
        Car(brand="BMW", model="3-Series", year=2012),
        Car(brand="BMW", model="5-Series", year=2017),
        Car(brand="Mercedes-Benz", model="CLA 63", year=2016),
    ]

import pytest

from dsalgo.animals import Animal, Cat, CatBreed, Dog, DogBreed


def test_animal_defaults():
    animal = Animal()
    assert (animal.age, animal.weight) == (0, 1)


def test_animal_keeps_given_values():
    animal = Animal(age=3, weight=7)
    animal.age = 4
    assert (animal.age, animal.weight) == (4, 7)


def test_animal_sound():
    assert Animal().sound() == "[Animal] Some Noise ..."


def test_cat_defaults():
    cat = Cat()
    assert cat.breed is CatBreed.KOREANSHORT
    assert (cat.age, cat.weight) == (0, 1)


def test_cat_breed_can_change():
    cat = Cat()
    cat.breed = CatBreed.MUNCHKIN
    assert cat.breed is CatBreed.MUNCHKIN


def test_cat_grooms_and_inherits_sound():
    cat = Cat()
    assert cat.groom() == "Grooming..."
    assert cat.sound() == Animal().sound()


def test_dog_defaults_and_bark():
    dog = Dog()
    assert dog.breed is DogBreed.RETRIEVER
    assert dog.bark() == "Woof Woof!"


def test_dog_breed_can_change():
    dog = Dog(breed=DogBreed.SHIBA)
    assert dog.breed is DogBreed.SHIBA


@pytest.mark.parametrize(
    "breed, value",
    [(CatBreed.KOREANSHORT, 0), (CatBreed.TURKISHANGORA, 3)],
)
def test_cat_breed_values_follow_declaration_order(breed, value):
    assert breed.value == value


def test_dog_breed_order():
    assert [DogBreed(value).name for value in range(4)] == ["RETRIEVER", "HUSKY", "SHIBA", "JINDOTGAE"]
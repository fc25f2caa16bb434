from functools import reduce
from typing import Callable


class Burger:

    def describe(self) -> str:
        raise NotImplementedError


class BeefBurger(Burger):

    def describe(self) -> str:
        return "I am a beef burger"


# Wraps another burger and forwards to it.
# Subclasses extend the description of the wrapped burger.
class BurgerDecorator(Burger):

    def __init__(self, burger: Burger):
        self.burger = burger

    def describe(self) -> str:
        return self.burger.describe()


class Bacon(BurgerDecorator):

    def describe(self) -> str:
        return super().describe() + ", with added bacon"


class Cheese(BurgerDecorator):

    def describe(self) -> str:
        return super().describe() + ", with added cheese"


def decorate(burger: Burger, *decorators: Callable[[Burger], Burger]) -> Burger:
    """Apply ``decorators`` to ``burger`` left to right.

    ``decorate(BeefBurger(), Bacon, Cheese)`` is the same burger as
    ``Cheese(Bacon(BeefBurger()))``.
    """
    return reduce(lambda wrapped, decorator: decorator(wrapped), decorators, burger)


if __name__ == '__main__':
    burger = Cheese(Bacon(BeefBurger()))
    print(burger.describe())

    burger = decorate(BeefBurger(), Cheese, Cheese)
    print(burger.describe())

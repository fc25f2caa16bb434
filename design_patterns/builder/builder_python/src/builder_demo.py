import argparse
import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class PizzaBuilderError(Exception):
    """Base exception for the pizza builder demo."""

    def to_dict(self) -> dict:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidStateError(PizzaBuilderError):
    """A builder or cook operation was called before its precondition was met."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__("%s: %s" % (operation, message))

    def to_dict(self) -> dict:
        return {
            "error": "INVALID_STATE",
            "operation": self.operation,
            "message": self.message,
        }


class Pizza:

    def __init__(self):
        self.dough = ""
        self.sauce = ""
        self.topping = ""

    def set_dough(self, dough: str):
        self.dough = dough

    def set_sauce(self, sauce: str):
        self.sauce = sauce

    def set_topping(self, topping: str):
        self.topping = topping

    def describe(self) -> str:
        return "Pizza with %s dough, " \
               "%s sauce and " \
               "%s topping." \
               % (self.dough, self.sauce, self.topping)

    def __str__(self):
        return self.describe()


# Builder abstraction. Holds the single pizza under construction;
# variants only decide what goes into each step.
class PizzaBuilder:

    def __init__(self):
        self.pizza: Optional[Pizza] = None

    def create_new_pizza_product(self):
        if self.pizza is not None:
            logger.warning("%s drops a pizza that was never retrieved", type(self).__name__)
        self.pizza = Pizza()
        logger.debug("%s created a new pizza", type(self).__name__)

    def get_pizza(self) -> Pizza:
        pizza = self._current_pizza("get_pizza")
        # hand-off: the caller owns the pizza from here on
        self.pizza = None
        logger.debug("%s handed off %s", type(self).__name__, pizza)
        return pizza

    def build_dough(self):
        raise NotImplementedError

    def build_sauce(self):
        raise NotImplementedError

    def build_topping(self):
        raise NotImplementedError

    def _current_pizza(self, operation: str) -> Pizza:
        if self.pizza is None:
            raise InvalidStateError(operation, "create_new_pizza_product() has not been called")
        return self.pizza

    def _set_field(self, operation: str, field: str, value: str):
        pizza = self._current_pizza(operation)
        getattr(pizza, "set_%s" % field)(value)
        logger.debug("%s set %s to %s", type(self).__name__, field, value)


class HawaiianPizzaBuilder(PizzaBuilder):

    def build_dough(self):
        self._set_field("build_dough", "dough", "cross")

    def build_sauce(self):
        self._set_field("build_sauce", "sauce", "mild")

    def build_topping(self):
        self._set_field("build_topping", "topping", "Ham and Pineapple")


class SpicyPizzaBuilder(PizzaBuilder):

    def build_dough(self):
        self._set_field("build_dough", "dough", "pan baked")

    def build_sauce(self):
        self._set_field("build_sauce", "sauce", "hot")

    def build_topping(self):
        self._set_field("build_topping", "topping", "pepperoni+salami")


class PizzaType(Enum):
    HAWAIIAN = "hawaiian"
    SPICY = "spicy"


PIZZA_BUILDERS = {
    PizzaType.HAWAIIAN: HawaiianPizzaBuilder,
    PizzaType.SPICY: SpicyPizzaBuilder,
}


def create_pizza_builder(pizza_type: PizzaType) -> PizzaBuilder:
    return PIZZA_BUILDERS[pizza_type]()


# Director. Knows the order of the build steps but
# nothing about what a particular builder puts in them.
class Cook:

    def __init__(self):
        self.pizza_builder: Optional[PizzaBuilder] = None
        self.pizza_ready = False

    def set_pizza_builder(self, pizza_builder: PizzaBuilder):
        self.pizza_builder = pizza_builder
        self.pizza_ready = False
        logger.debug("Cook switched to %s", type(pizza_builder).__name__)

    def construct_pizza(self):
        builder = self._current_builder("construct_pizza")
        self.pizza_ready = False
        builder.create_new_pizza_product()
        try:
            builder.build_dough()
            builder.build_sauce()
            builder.build_topping()
        except Exception:
            # a half-built pizza is never handed out
            builder.pizza = None
            raise
        self.pizza_ready = True

    def get_pizza(self) -> Pizza:
        builder = self._current_builder("get_pizza")
        if self.pizza_ready is False:
            raise InvalidStateError("get_pizza", "construct_pizza() has not completed for the current builder")
        pizza = builder.get_pizza()
        self.pizza_ready = False
        return pizza

    def _current_builder(self, operation: str) -> PizzaBuilder:
        if self.pizza_builder is None:
            raise InvalidStateError(operation, "set_pizza_builder() has not been called")
        return self.pizza_builder


def parse_args(argv=None) -> argparse.Namespace:
    arg_parser = argparse.ArgumentParser(description="Builder pattern demo: a cook assembling pizzas")
    arg_parser.add_argument(
        "--pizza",
        action="append",
        choices=[pizza_type.value for pizza_type in PizzaType],
        help="Pizza to build, may be repeated (default: all)"
    )
    arg_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every build step"
    )
    return arg_parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(logging.DEBUG if args.verbose else logging.WARNING)
    pizza_types = [PizzaType(name) for name in args.pizza] if args.pizza else list(PizzaType)

    cook = Cook()
    for pizza_type in pizza_types:
        cook.set_pizza_builder(create_pizza_builder(pizza_type))
        cook.construct_pizza()
        pizza = cook.get_pizza()
        print(pizza.describe())


if __name__ == '__main__':
    main()

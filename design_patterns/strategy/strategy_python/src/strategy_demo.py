import logging
from typing import Optional

logger = logging.getLogger(__name__)


class DuckError(Exception):
    """Base exception for the duck strategy demo."""

    def to_dict(self) -> dict:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidStateError(DuckError):
    """The duck was asked to quack before it was given a quack behaviour."""

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


class QuackBehaviour:

    def do_quack(self) -> str:
        return "Quack"


class LoudQuackBehaviour(QuackBehaviour):

    def do_quack(self) -> str:
        return "Quack!!"


# The duck does not know how it quacks; the behaviour
# is handed in by whoever creates it and can be swapped later
class Duck:

    def __init__(self, quack_behaviour: Optional[QuackBehaviour] = None):
        self.quack_behaviour = quack_behaviour

    def set_quack(self, quack_behaviour: QuackBehaviour):
        logger.debug("Duck switched to %s", type(quack_behaviour).__name__)
        self.quack_behaviour = quack_behaviour

    def quack(self) -> str:
        if self.quack_behaviour is None:
            raise InvalidStateError("quack", "no quack behaviour set")
        return self.quack_behaviour.do_quack()


if __name__ == '__main__':
    duck = Duck(QuackBehaviour())
    print(duck.quack())

    # set the behaviour you want at runtime
    duck.set_quack(LoudQuackBehaviour())
    print(duck.quack())

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ShapeType(Enum):
    CIRCLE = 1
    SQUARE = 2


class Shape:

    def __init__(self, name: str):
        self.name = name

    def draw(self) -> str:
        return "drawing %s" % self.name


class Circle(Shape):

    def __init__(self):
        super().__init__("Circle")


class Square(Shape):

    def __init__(self):
        super().__init__("Square")


# Single place deciding which concrete shape
# a given shape type maps to
class ShapeFactory:

    def get_shape(self, shape_type: ShapeType) -> Shape:
        if shape_type == ShapeType.SQUARE:
            shape = Square()
        elif shape_type == ShapeType.CIRCLE:
            shape = Circle()
        else:
            logger.warning("Unknown shape type %r, falling back to a circle", shape_type)
            shape = Circle()
        logger.debug("ShapeFactory created %s", shape.name)
        return shape


if __name__ == '__main__':
    factory = ShapeFactory()

    shape = factory.get_shape(ShapeType.CIRCLE)
    print(shape.draw())

    another_shape = factory.get_shape(ShapeType.SQUARE)
    print(another_shape.draw())

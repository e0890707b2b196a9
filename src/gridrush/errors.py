class OutOfBounds(IndexError):
    """Grid access outside ``[0, size)`` on either axis."""

    def __init__(self, x: int, y: int, size: int) -> None:
        super().__init__(f"cell ({x}, {y}) outside {size}x{size} grid")
        self.x = x
        self.y = y
        self.size = size

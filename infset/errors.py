class InfiniteSetError(ValueError):
    def __init__(self, message: str = "cannot enumerate a complement set"):
        super().__init__(message)


class NotAUnionError(ValueError):
    """Raised when a complement is narrowed to a finite set.

    `value` is the original instance, left untouched.
    """

    def __init__(self, value):
        super().__init__(f"{value!r} is a complement, not a union")
        self.value = value


class NotAComplementError(ValueError):
    """Raised when a union is narrowed to its excluded elements.

    `value` is the original instance, left untouched.
    """

    def __init__(self, value):
        super().__init__(f"{value!r} is a union, not a complement")
        self.value = value

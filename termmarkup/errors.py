class MarkupError(ValueError):
    """Base class of the errors raised while resolving tag attributes."""

    def __init__(self, message: str, value: str) -> None:
        super().__init__(message, value)
        self.message = message
        self.value = value

    def __str__(self) -> str:
        return f'{self.message} "{self.value}"'


class UnknownColorName(MarkupError):

    def __init__(self, name: str) -> None:
        super().__init__("Unknown color name", name)
        self.name = name


class UnknownModifierName(MarkupError):

    def __init__(self, name: str) -> None:
        super().__init__("Unknown modifier name", name)
        self.name = name

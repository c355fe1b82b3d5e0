class MenuResolutionError(Exception):
    """Base class for request errors raised while resolving a menu."""


class InvalidLanguageId(MenuResolutionError):
    def __init__(self, value):
        super().__init__(f"Invalid language id: {value!r}")
        self.value = value

"""Domain errors surfaced at the HTTP boundary."""


class FoodNotFoundError(LookupError):
    """Raised when no food matches the requested slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Food not found: {slug}")
        self.slug = slug


class InvalidActionError(ValueError):
    """Raised when a food action request names an unknown action."""

    def __init__(self, action: object) -> None:
        super().__init__(f"Invalid action: {action!r}")
        self.action = action


class InvalidFoodDataError(ValueError):
    """Raised when source data breaks the catalog invariants."""

"""Exceptions raised by the shopping list pipeline.

Only CollaboratorUnavailableError is meant to reach callers of the
pipeline; everything else degrades locally.
"""


class ShoppingListError(Exception):
    """Base class for shopping list failures."""


class CollaboratorUnavailableError(ShoppingListError):
    """The recipe catalog, plan store or shopping list store could not be read or written."""

    def __init__(self, collaborator: str, cause: BaseException = None):
        self.collaborator = collaborator
        self.cause = cause
        msg = f"{collaborator} unavailable"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)


class StaleRegenerationError(ShoppingListError):
    """A newer regeneration for the same week started before this one finished."""

    def __init__(self, week_id: str, generation: int):
        self.week_id = week_id
        self.generation = generation
        super().__init__(f"generation {generation} of {week_id} superseded")


class ShoppingItemNotFoundError(ShoppingListError, KeyError):
    def __init__(self, week_id: str, item_id: str):
        self.week_id = week_id
        self.item_id = item_id
        super().__init__(f"item {item_id!r} not in shopping list {week_id!r}")

    def __str__(self) -> str:
        return self.args[0]

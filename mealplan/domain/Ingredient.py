"""Ingredient domain entity: name, amount and unit as written in a recipe."""


class Ingredient:
    def __init__(self, name: str = "", amount: str = "", unit: str = ""):
        self.name = name
        self.amount = amount
        self.unit = unit

    def __str__(self) -> str:
        return " ".join(p for p in (self.amount, self.unit, self.name) if p)

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.name, self.amount, self.unit) == (other.name, other.amount, other.unit)

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            name=str(d.get("name") or ""),
            amount=str(d.get("amount") or ""),
            unit=str(d.get("unit") or ""),
        )

    def to_dict(self):
        '''Converts the Ingredient object to a dictionary for JSON persistence.'''
        return {"name": self.name, "amount": self.amount, "unit": self.unit}

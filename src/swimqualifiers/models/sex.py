"""Competition sex categories."""

from enum import StrEnum


class Sex(StrEnum):
    """Sex category used to key standards and report sheets."""

    MEN = "Men"
    WOMEN = "Women"

    @property
    def sheet_name(self) -> str:
        """Workbook tab name for this category ('Mens' / 'Womens')."""
        return f"{self.value}s"

    @classmethod
    def from_token(cls, token: str) -> "Sex | None":
        """Map a filename or sheet token to a category.

        Meet files say "M"/"F", the standards workbook says "Mens"/"Womens".
        Returns None for anything unrecognized.
        """
        return _SEX_TOKENS.get(token.strip().lower())


_SEX_TOKENS: dict[str, Sex] = {
    # Men
    "m": Sex.MEN,
    "men": Sex.MEN,
    "mens": Sex.MEN,
    "male": Sex.MEN,
    "b": Sex.MEN,
    "boys": Sex.MEN,
    # Women
    "f": Sex.WOMEN,
    "w": Sex.WOMEN,
    "women": Sex.WOMEN,
    "womens": Sex.WOMEN,
    "female": Sex.WOMEN,
    "g": Sex.WOMEN,
    "girls": Sex.WOMEN,
}

class ConversionError(Exception):
    """Base exception for conversion failures."""


class SourceGraphError(ConversionError):
    """Raised when the input is not a usable GEDCOM X object."""


class RegistryError(ConversionError):
    """Raised when a record factory re-enters creation of its own key."""


class NumberingError(ConversionError):
    """
    Raised when a numbering key refers to an ancestor position that has no
    person. The numbering table is inconsistent and cannot be repaired.
    """

    def __init__(self, key: str, missing: str):
        super().__init__(f"Generation number {key} without {missing}")
        self.key = key
        self.missing = missing

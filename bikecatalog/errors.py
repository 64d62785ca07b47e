class CatalogError(Exception):
    """Base class for catalog errors."""


class UnknownVariantError(CatalogError, ValueError):
    def __init__(self, tag):
        self.tag = tag
        super().__init__(f"unknown bicycle variant: {tag!r}")


class UnknownAttributeError(CatalogError, KeyError):
    def __init__(self, key):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"unknown bicycle attribute: {self.key!r}"

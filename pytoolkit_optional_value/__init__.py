from .optional import InvalidArgumentError, Nullable, OptionalValue

__all__ = [
    "OptionalValue",
    "Nullable",
    "InvalidArgumentError",
]

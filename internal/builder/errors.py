class ErrInvalidSize(ValueError):
    pass


class ErrMissingField(ValueError):
    pass


__all__ = [
    "ErrInvalidSize",
    "ErrMissingField",
]

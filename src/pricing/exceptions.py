"""Pricing errors raised back to callers."""


class UnsupportedDiscountPolicy(ValueError):
    """The caller asked for a discount policy kind that does not exist."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Unsupported discount policy type: {kind}")

"""
Base class for Value Objects.

Tokens, phrases, selections, definition records and panel positions never
change in place. A toggle or merge builds a new object and the session
swaps it in, so a snapshot handed to a reader stays consistent.
"""


class ValueObject:
    """
    Attribute-compared, immutable domain value.

    Concrete classes are frozen dataclasses that check their own invariants
    in __post_init__ (a Phrase has two or more ascending positions, a
    DefinitionRecord holds at most three definitions).
    """

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.__dict__.items())))

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"{self.__class__.__name__}({attrs})"

    def to_primitive(self) -> object:
        """
        Flatten for event payloads and log context.

        A single-field value (PickerSessionId) becomes that field; anything
        wider becomes a dict.
        """
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)

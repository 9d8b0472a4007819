from dataclasses import dataclass


@dataclass(frozen=True)
class ChangeReference:
    """Numeric identifier of a Gerrit change, as extracted from a change URL."""

    value: str

    def __post_init__(self):
        if not self.value or not self.value.isascii() or not self.value.isdigit():
            raise ValueError(f"Change reference must be a numeric id, got '{self.value}'")

    def __str__(self) -> str:
        return self.value

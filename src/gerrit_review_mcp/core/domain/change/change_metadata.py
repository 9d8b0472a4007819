from dataclasses import dataclass


@dataclass(frozen=True)
class ChangeMetadata:
    """The slice of a Gerrit ChangeInfo needed to locate the latest patch set."""

    current_revision: str = ""

    @property
    def has_current_revision(self) -> bool:
        return bool(self.current_revision)

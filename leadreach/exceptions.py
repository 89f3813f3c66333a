"""Exception types for the template placeholder engine.

None of these are fatal to the process. The worst outcome of any of them is
an edit that the user has to correct and save again.
"""


class LeadReachError(Exception):
    """Base class for all LeadReach errors."""


class ValidationError(LeadReachError, ValueError):
    """A template failed validation before save (empty name, empty body, ...).

    Recoverable: the user corrects the field and retries.
    """

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field


class ReservedNameError(LeadReachError, ValueError):
    """A custom placeholder name collides with the auto-placeholder registry."""

    def __init__(self, name: str):
        super().__init__(f"'{name}' is reserved for an auto placeholder")
        self.name = name


class DuplicateNameError(LeadReachError):
    """A custom placeholder with this name is already tracked.

    Informational only: the inventory is left unchanged.
    """

    def __init__(self, name: str):
        super().__init__(f"Placeholder '{name}' already exists")
        self.name = name


class PersistenceError(LeadReachError):
    """The persistence store failed to read or write a record.

    Local editing state is preserved so no work is lost.
    """


class MigrationFallback:
    """Marker for a persisted placeholder field in an unrecognized shape.

    Never raised. The migrator logs it and normalizes to an empty inventory.
    """

    def __init__(self, raw):
        self.raw = raw

    def __repr__(self):
        return f"<MigrationFallback(type={type(self.raw).__name__})>"

"""Exception types for termnotes."""


class TermnotesError(Exception):
    """Base class for termnotes errors."""


class StoreError(TermnotesError):
    """The note database could not be opened, read or written."""


class PreconditionError(TermnotesError, ValueError):
    """A caller broke an API contract (e.g. updating an unsaved note)."""


class InputError(TermnotesError):
    """A terminal event that cannot be turned into a KeyEvent."""

    def __init__(self, raw):
        super().__init__(f"Unrecognised input: {raw!r}")
        self.raw = raw

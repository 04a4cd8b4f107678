"""Error types raised by the Grab Actions backend.

Every error carries a human-readable message; the command surface hands
``str(error)`` straight to the presentation layer.
"""


class GrabError(Exception):
    """Base class for all surfaced backend failures."""


class AppSupportError(GrabError):
    """The home or application-support directory could not be resolved."""


class SettingsError(GrabError):
    """The settings file could not be read, parsed or written."""


class MetadataError(GrabError):
    """A sidecar metadata file could not be read or did not match the schema."""


class ScanError(GrabError):
    """The capture directory could not be enumerated."""


class CaptureNotFoundError(GrabError):
    """A named artifact (or its sidecar) does not exist."""


class CaptureReadError(GrabError):
    """A named artifact exists but could not be read or written."""


class ClipboardEventError(GrabError):
    """A pending clipboard event file held unparsable data."""


class ClipboardError(GrabError):
    """The external clipboard-set invocation failed.

    Attributes:
        output: Diagnostic text captured from the external command
    """

    def __init__(self, message: str, output: str = ""):
        super().__init__(message)
        self.output = output

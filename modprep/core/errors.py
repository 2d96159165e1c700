"""Error kinds raised by the instantiation pipeline."""


class InstantiationError(Exception):
    """Base class for failures that abort a run."""

    kind = "instantiation_error"


class InvalidInputError(InstantiationError):
    """Bad or missing template root, destination base or mod name."""

    kind = "invalid_input"


class AmbiguousOrMissingFileError(InstantiationError):
    """Zero or several candidates where exactly one file is required."""

    kind = "ambiguous_or_missing_file"


class TargetExistsError(InstantiationError):
    """A rename target is already taken by a different file."""

    kind = "target_exists"


class InvalidFormatError(InstantiationError):
    """A file does not have the structure the pipeline expects."""

    kind = "invalid_format"

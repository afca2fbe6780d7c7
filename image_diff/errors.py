class ImageDiffError(Exception):
    """Base class for every error raised by the diff step."""


class ConfigError(ImageDiffError):
    """A required step input is missing or malformed."""


class ConfigValidationError(ImageDiffError):
    """before_images and after_images cannot be used together."""


class DirectoryListError(ImageDiffError):
    """The after-images directory could not be enumerated."""


class DecodeError(ImageDiffError):
    """A source file exists but is not a decodable raster image."""


class WriteError(ImageDiffError):
    """A diff image could not be encoded or written."""


class ExportError(ImageDiffError):
    """The output location could not be exposed to the CI system."""

class InvalidRegionError(Exception):
    """
    raised when the viewport (region model) is empty or a region is malformed
    """
    pass


class MalformedBreakendError(Exception):
    """
    raised when a structural variant record does not give exactly two breakends
    with valid orientations
    """
    pass


class UnsupportedBuildError(Exception):
    pass


class ConfigurationError(Exception):
    """
    raised for unrecognized, contradictory or out-of-range drawing options
    """
    pass


class NotInViewportError(IndexError):
    """
    raised when a genomic position does not fall in any region of the composite axis
    """
    pass

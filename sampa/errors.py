class SampaError(Exception):
    """Base error."""


class SolarPositionError(SampaError, ValueError):
    """Raised when the solar position algorithm rejects its inputs."""


class ClearSkyError(SampaError, ValueError):
    """Raised when the clear sky model rejects its inputs."""


class DomainError(SampaError, ValueError):
    """Raised when an inverse sine leaves [-1, 1] for the given inputs."""

"""Exceptions raised by Learning Coach services."""


class LearningCoachError(Exception):
    """Base class for errors surfaced to the session controller."""


class ConfigurationError(LearningCoachError):
    """A required setting (e.g. GOOGLE_API_KEY) is missing."""


class CommunicationError(LearningCoachError):
    """The call to the generative model failed."""


class CatalogError(LearningCoachError):
    """The resource catalog could not be fetched."""

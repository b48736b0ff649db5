from valentine.utilities.env.logging import LoggingConfiguration
from valentine.utilities.env.rendering import RenderingConfiguration


class Configuration(LoggingConfiguration, RenderingConfiguration):
    """Aggregate environment configuration helpers."""

"""Default configuration, the single source of run parameters."""

from metrograph.config.settings import MetroConfig

# All-default values: up to 1000 stations, tree rooted at the first station,
# 1-based station numbers in the output file.
DEFAULT_CONFIG = MetroConfig()

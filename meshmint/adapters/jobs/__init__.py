"""Remote job service clients."""

from meshmint.adapters.jobs.crossmint_client import CrossmintClient
from meshmint.adapters.jobs.meshy_client import MeshyClient

__all__ = ["CrossmintClient", "MeshyClient"]

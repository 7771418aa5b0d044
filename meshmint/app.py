"""FastAPI application and startup."""

from fastapi import FastAPI
from pydantic import BaseModel

from meshmint.adapters.web import action_routes
from meshmint.config import CONFIG, __version__

app = FastAPI(title="MeshMint Action Server", version=__version__)
app.include_router(action_routes.actions_router)


class StatusResponse(BaseModel):
    version: str
    aiProvider: str
    actions: int
    meshyConfigured: bool
    crossmintConfigured: bool


def _client_configured(action_name: str) -> bool:
    """Whether the remote client behind ``action_name`` has its credentials."""
    action = action_routes.registry.get(action_name)
    client = getattr(action, "client", None)
    return bool(client is not None and client.is_configured)


@app.get("/status", response_model=StatusResponse)
async def status():
    """Server status endpoint"""
    return StatusResponse(
        version=__version__,
        aiProvider=CONFIG["ai_provider"],
        actions=len(action_routes.registry.list_actions()),
        meshyConfigured=_client_configured("TEXT_TO_3D"),
        crossmintConfigured=_client_configured("MINT_NFT"),
    )


@app.on_event("startup")
async def startup_event():
    print("MeshMint action server starting")
    for action in action_routes.registry.list_actions():
        print(f"  action: {action.name}")
    if not _client_configured("TEXT_TO_3D"):
        print("MESHY_API_KEY not set: TEXT_TO_3D will report a config error")
    if not _client_configured("MINT_NFT"):
        print("CROSSMINT_API_KEY not set: minting actions will report a config error")
    print("Ready!")

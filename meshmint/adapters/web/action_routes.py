"""Action API routes."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from meshmint.config import AppConfig
from meshmint.ports.inbound import ActionRequest, ConversationMessage
from meshmint.wiring import build_registry

actions_router = APIRouter(prefix="/actions", tags=["Actions"])

registry = build_registry(AppConfig.from_env())


class HistoryMessage(BaseModel):
    role: str
    text: str
    content: Dict[str, Any] = Field(default_factory=dict)


class ActionRunRequest(BaseModel):
    text: str
    history: List[HistoryMessage] = Field(default_factory=list)
    artifacts: Dict[str, str] = Field(default_factory=dict)
    user_name: str = "user"


class ActionRunResponse(BaseModel):
    action: str
    success: bool
    declined: bool = False
    text: Optional[str] = None
    content: Optional[Dict[str, Any]] = None
    artifacts: Dict[str, str] = Field(default_factory=dict)


class ActionInfo(BaseModel):
    name: str
    similes: List[str]
    description: str


@actions_router.get("", response_model=List[ActionInfo])
async def list_actions():
    return [ActionInfo(**action.describe()) for action in registry.list_actions()]


@actions_router.post("/{name}", response_model=ActionRunResponse)
async def run_action(name: str, req: ActionRunRequest):
    action = registry.get(name)
    if action is None:
        raise HTTPException(status_code=404, detail=f"Unknown action: {name}")

    request = ActionRequest(
        text=req.text,
        history=[ConversationMessage(role=m.role, text=m.text, content=m.content) for m in req.history],
        artifacts=dict(req.artifacts),
        user_name=req.user_name,
    )
    if not await action.validate(request):
        return ActionRunResponse(action=action.name, success=False, declined=True, artifacts=request.artifacts)

    result = await action.run(request)
    return ActionRunResponse(
        action=action.name,
        success=result.success,
        text=result.text,
        content=result.content,
        artifacts=request.artifacts,
    )

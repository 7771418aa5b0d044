"""TEXT_TO_3D: generate a 3D model from a description via Meshy."""

from typing import Optional

from meshmint.domain.actions.base import Action, ActionState
from meshmint.domain.actions.templates import TEXT_TO_3D_TEMPLATE
from meshmint.domain.errors import ActionError
from meshmint.domain.extraction import StructuredExtractor
from meshmint.domain.models import ActionResult
from meshmint.domain.polling import UNBOUNDED_POLICY, JobPoller
from meshmint.ports.inbound import ActionRequest
from meshmint.ports.outbound import RemoteJobClient

MODEL_URL_ARTIFACT = "modelUrl"


class TextTo3DAction(Action):
    name = "TEXT_TO_3D"
    similes = ("GENERATE_3D", "CREATE_3D_MODEL", "MAKE_3D", "MODEL_FROM_TEXT")
    description = "Generates a 3D model from a text description using Meshy API"
    template = TEXT_TO_3D_TEMPLATE
    required_fields = ("prompt", "artStyle", "negativePrompt")
    error_context = "generating 3D model"
    examples = [
        [
            ("{{user1}}", {
                "text": "Create a detailed monster mask with horns and sharp teeth, make it look realistic",
            }),
            ("{{user2}}", {
                "text": "I'll generate a 3D model of your monster mask...",
                "action": "TEXT_TO_3D",
            }),
            ("{{user2}}", {
                "text": (
                    "I've generated a 3D model based on your description!\n"
                    "Prompt: detailed monster mask with horns and sharp teeth\n"
                    "Style: realistic\n"
                    "You can download the model here: https://assets.meshy.ai/models/xyz.glb"
                ),
            }),
        ],
    ]

    def __init__(
        self,
        extractor: StructuredExtractor,
        client: RemoteJobClient,
        poller: Optional[JobPoller] = None,
    ):
        super().__init__(extractor)
        self.client = client
        # Meshy finishes every task eventually, so there is no attempt cap.
        self.poller = poller or JobPoller(UNBOUNDED_POLICY, name=self.name)

    async def perform(self, request: ActionRequest) -> ActionResult:
        params = await self.extract(request)

        self._enter(ActionState.SUBMITTING)
        handle = await self.client.submit(params)

        self._enter(ActionState.POLLING)
        status = await self.poller.poll(self.client, handle)
        if not status.is_succeeded:
            # Only reachable when a bounded poller was injected
            raise ActionError(f"Model generation still {status.raw_status} (task {handle.job_id})")
        model_url = status.payload

        content = {
            "text": f"Generated 3D model from prompt: {params['prompt']}",
            "prompt": params["prompt"],
            "artStyle": params["artStyle"],
            "negativePrompt": params["negativePrompt"],
            "modelUrl": model_url,
            "previewTaskId": handle.job_id,
        }
        request.artifacts[MODEL_URL_ARTIFACT] = model_url

        return ActionResult(
            text=(
                "I've generated a 3D model based on your description!\n"
                f"Prompt: {params['prompt']}\n"
                f"Style: {params['artStyle']}\n"
                f"You can download the model here: {model_url}"
            ),
            content=content,
        )

"""MINT_NFT and MINT_3D_NFT: mint through Crossmint and wait for it.

Minting polls with a bounded policy. When the attempts run out the mint is
reported as "Initiated" with status ``pending`` instead of failing.
"""

from typing import Any, Dict, List, Optional

from meshmint.domain.actions.base import Action, ActionState
from meshmint.domain.actions.templates import MINT_3D_NFT_TEMPLATE, MINT_NFT_TEMPLATE
from meshmint.domain.actions.text_to_3d import MODEL_URL_ARTIFACT
from meshmint.domain.extraction import StructuredExtractor
from meshmint.domain.models import ActionResult, ExtractedParameters, JobStatus
from meshmint.domain.polling import BOUNDED_MINT_POLICY, JobPoller
from meshmint.ports.inbound import ActionRequest
from meshmint.ports.outbound import RemoteJobClient

MINT_STATUS_SUCCESS = "success"
MINT_STATUS_PENDING = "pending"

MODEL_ATTRIBUTES: List[Dict[str, str]] = [
    {"trait_type": "Model Type", "value": "3D Asset"},
    {"trait_type": "File Format", "value": "GLB"},
]


def mint_status_label(status: JobStatus) -> str:
    """``success`` once confirmed, otherwise the last raw status seen."""
    if status.is_succeeded:
        return MINT_STATUS_SUCCESS
    return status.raw_status or MINT_STATUS_PENDING


class MintNFTAction(Action):
    name = "MINT_NFT"
    similes = ("CREATE_NFT", "GENERATE_NFT", "DEPLOY_NFT", "SEND_NFT")
    description = "Mints an NFT using Crossmint API and sends it to specified recipient"
    template = MINT_NFT_TEMPLATE
    required_fields = ("name", "description", "image", "recipient", "chain")
    error_context = "minting NFT"
    title = "NFT Minting"
    examples = [
        [
            ("{{user1}}", {
                "text": (
                    "Mint an NFT called 'Cool Art' with the description 'A unique digital artwork' "
                    "and send it to user@example.com on Solana testnet"
                ),
            }),
            ("{{user2}}", {"text": "I'll mint your NFT now...", "action": "MINT_NFT"}),
            ("{{user2}}", {
                "text": (
                    "NFT Minting Completed!\n"
                    "Name: Cool Art\n"
                    "Description: A unique digital artwork\n"
                    "Chain: solana\n"
                    "Recipient: email:user@example.com:solana\n"
                    "Action ID: 6410b5a7-f6f8-4776-9480-13ef83389808"
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
        self.poller = poller or JobPoller(BOUNDED_MINT_POLICY, name=self.name)

    def mint_params(self, params: ExtractedParameters) -> Dict[str, Any]:
        return params.as_dict()

    def detail_lines(self, content: Dict[str, Any]) -> List[str]:
        return [
            f"Name: {content['name']}",
            f"Description: {content['description']}",
            f"Chain: {content['chain']}",
            f"Recipient: {content['recipient']}",
            f"Action ID: {content['actionId']}",
        ]

    async def extract_params(self, request: ActionRequest) -> ExtractedParameters:
        return await self.extract(request)

    async def perform(self, request: ActionRequest) -> ActionResult:
        params = await self.extract_params(request)

        self._enter(ActionState.SUBMITTING)
        handle = await self.client.submit(self.mint_params(params))

        self._enter(ActionState.POLLING)
        status = await self.poller.poll(self.client, handle)
        mint_status = mint_status_label(status)

        content: Dict[str, Any] = {
            **params.as_dict(),
            "actionId": handle.job_id,
            "status": mint_status,
        }
        outcome = "Completed" if mint_status == MINT_STATUS_SUCCESS else "Initiated"
        text = "\n".join([f"{self.title} {outcome}!"] + self.detail_lines(content))
        return ActionResult(text=text, content=content)


class Mint3DNFTAction(MintNFTAction):
    name = "MINT_3D_NFT"
    similes = ("MINT_3D_MODEL", "CREATE_3D_NFT", "MINT_MODEL", "CREATE_MODEL_NFT")
    description = "Mints an NFT from a generated 3D model using Crossmint API"
    template = MINT_3D_NFT_TEMPLATE
    required_fields = ("name", "description", "modelUrl", "recipient", "chain")
    error_context = "minting 3D NFT"
    title = "3D Model NFT Minting"
    examples = [
        [
            ("{{user1}}", {"text": "Generate a 3D monster mask with horns"}),
            ("{{user2}}", {
                "text": (
                    "I've generated a 3D model based on your description!\n"
                    "Prompt: detailed monster mask with horns\n"
                    "Style: realistic\n"
                    "You can download the model here: https://assets.meshy.ai/models/abc123.glb"
                ),
                "modelUrl": "https://assets.meshy.ai/models/abc123.glb",
            }),
            ("{{user1}}", {
                "text": "Mint this 3D model as an NFT and send it to user@example.com on Solana testnet",
            }),
            ("{{user2}}", {
                "text": (
                    "3D Model NFT Minting Completed!\n"
                    "Name: 3D Monster Mask NFT\n"
                    "Description: A unique 3D monster mask with horns\n"
                    "Chain: solana\n"
                    "Model URL: https://assets.meshy.ai/models/abc123.glb\n"
                    "Recipient: email:user@example.com:solana\n"
                    "Action ID: 6410b5a7-f6f8-4776-9480-13ef83389808"
                ),
            }),
        ],
    ]

    async def validate(self, request: ActionRequest) -> bool:
        """Only runs when an earlier turn produced a model URL."""
        return request.find_artifact(MODEL_URL_ARTIFACT) is not None

    async def extract_params(self, request: ActionRequest) -> ExtractedParameters:
        return await self.extract(
            request, modelUrl=request.find_artifact(MODEL_URL_ARTIFACT) or ""
        )

    def mint_params(self, params: ExtractedParameters) -> Dict[str, Any]:
        return {
            "recipient": params["recipient"],
            "name": params["name"],
            "image": params["modelUrl"],
            "description": params["description"],
            "attributes": MODEL_ATTRIBUTES,
        }

    def detail_lines(self, content: Dict[str, Any]) -> List[str]:
        lines = super().detail_lines(content)
        lines.insert(3, f"Model URL: {content['modelUrl']}")
        return lines

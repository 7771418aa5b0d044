"""Builds clients, pollers and actions from AppConfig."""

from typing import Optional

from meshmint.adapters.jobs import CrossmintClient, MeshyClient
from meshmint.adapters.llm import create_executor
from meshmint.adapters.market import CoinDeskClient
from meshmint.config import MODEL_ALIASES_BY_PROVIDER, AppConfig
from meshmint.domain.actions import (
    BitcoinPriceAction,
    Mint3DNFTAction,
    MintNFTAction,
    TextTo3DAction,
)
from meshmint.domain.extraction import StructuredExtractor
from meshmint.domain.polling import JobPoller, PollPolicy, Sleep
from meshmint.domain.registry import ActionRegistry
from meshmint.ports.outbound import LLMPort


def build_registry(
    config: AppConfig,
    llm: Optional[LLMPort] = None,
    sleep: Optional[Sleep] = None,
) -> ActionRegistry:
    """Wire every action. Credentials go straight into client constructors."""
    llm = llm or create_executor(config.ai_provider)
    aliases = MODEL_ALIASES_BY_PROVIDER.get(config.ai_provider, {})
    extractor = StructuredExtractor(llm, model=aliases.get(config.default_model))
    timeout = config.polling.http_timeout_seconds

    meshy = MeshyClient(
        config.meshy.api_key,
        api_base=config.meshy.api_base,
        timeout=timeout,
    )
    crossmint = CrossmintClient(
        config.crossmint.api_key,
        api_base=config.crossmint.api_base,
        collection=config.crossmint.collection,
        timeout=timeout,
    )

    generation_policy = PollPolicy(delay_seconds=config.polling.interval_seconds)
    mint_policy = PollPolicy(
        delay_seconds=config.polling.interval_seconds,
        max_attempts=config.polling.mint_max_attempts,
    )

    return ActionRegistry([
        TextTo3DAction(
            extractor,
            meshy,
            JobPoller(generation_policy, sleep=sleep, name=TextTo3DAction.name),
        ),
        MintNFTAction(
            extractor,
            crossmint,
            JobPoller(mint_policy, sleep=sleep, name=MintNFTAction.name),
        ),
        Mint3DNFTAction(
            extractor,
            crossmint,
            JobPoller(mint_policy, sleep=sleep, name=Mint3DNFTAction.name),
        ),
        BitcoinPriceAction(extractor, CoinDeskClient(timeout=timeout)),
    ])

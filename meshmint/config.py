"""Configuration and shared settings."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

SUPPORTED_AI_PROVIDERS = ("claude", "codex")
AI_PROVIDER = os.getenv("AI_PROVIDER", "claude").strip().lower()
if AI_PROVIDER not in SUPPORTED_AI_PROVIDERS:
    _stderr_print(f"Unsupported AI_PROVIDER={AI_PROVIDER!r}, falling back to 'claude'")
    AI_PROVIDER = "claude"

MODEL_ALIASES_BY_PROVIDER = {
    "claude": {
        "large": os.getenv("CLAUDE_MODEL_LARGE", "claude-sonnet-4-5-20250929"),
        "small": os.getenv("CLAUDE_MODEL_SMALL", "claude-haiku-4-5-20251001"),
    },
    "codex": {
        "large": os.getenv("CODEX_MODEL_LARGE", "gpt-5.3-codex"),
        "small": os.getenv("CODEX_MODEL_SMALL", "gpt-5.3-codex-mini"),
    },
}

MODEL_ALIASES = MODEL_ALIASES_BY_PROVIDER[AI_PROVIDER]

DEFAULT_MODEL = os.getenv("AI_DEFAULT_MODEL", "large").strip().lower()
if DEFAULT_MODEL not in MODEL_ALIASES:
    _stderr_print(
        f"Unsupported AI_DEFAULT_MODEL={DEFAULT_MODEL!r} for provider={AI_PROVIDER!r}, "
        "falling back to 'large'"
    )
    DEFAULT_MODEL = "large"


def _float_env(name: str, default: float, minimum: Optional[float] = None) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, using {default}")
        return default
    if minimum is not None and value < minimum:
        _stderr_print(f"{name}={raw!r} is below {minimum}, using {default}")
        return default
    return value


def _int_env(name: str, default: int, minimum: Optional[int] = None) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, using {default}")
        return default
    if minimum is not None and value < minimum:
        _stderr_print(f"{name}={raw!r} is below {minimum}, using {default}")
        return default
    return value


CONFIG = {
    "port": _int_env("PORT", 3000, minimum=1),
    "ai_provider": AI_PROVIDER,
    # Meshy (text-to-3D)
    "meshy_api_key": os.getenv("MESHY_API_KEY", ""),
    "meshy_api_base": os.getenv("MESHY_API_BASE", "https://api.meshy.ai"),
    # Crossmint (NFT minting), staging by default
    "crossmint_api_key": os.getenv("CROSSMINT_API_KEY", ""),
    "crossmint_api_base": os.getenv("CROSSMINT_API_BASE", "https://staging.crossmint.com"),
    "crossmint_collection": os.getenv("CROSSMINT_COLLECTION", "default"),
    # Polling
    "poll_interval_seconds": _float_env("POLL_INTERVAL_SECONDS", 5.0, minimum=0.0),
    "mint_max_attempts": _int_env("MINT_MAX_ATTEMPTS", 12, minimum=1),
    "http_timeout_seconds": _float_env("HTTP_TIMEOUT_SECONDS", 30.0, minimum=1.0),
}


# ── Typed config ────────────────────────────────────────────


@dataclass
class MeshyConfig:
    api_key: str = ""
    api_base: str = "https://api.meshy.ai"


@dataclass
class CrossmintConfig:
    api_key: str = ""
    api_base: str = "https://staging.crossmint.com"
    collection: str = "default"


@dataclass
class PollingConfig:
    interval_seconds: float = 5.0
    mint_max_attempts: int = 12
    http_timeout_seconds: float = 30.0


@dataclass
class AppConfig:
    """Typed configuration handed to client and action factories."""

    port: int = 3000
    ai_provider: str = "claude"
    default_model: str = "large"
    meshy: MeshyConfig = field(default_factory=MeshyConfig)
    crossmint: CrossmintConfig = field(default_factory=CrossmintConfig)
    polling: PollingConfig = field(default_factory=PollingConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=CONFIG["port"],
            ai_provider=AI_PROVIDER,
            default_model=DEFAULT_MODEL,
            meshy=MeshyConfig(
                api_key=CONFIG["meshy_api_key"],
                api_base=CONFIG["meshy_api_base"],
            ),
            crossmint=CrossmintConfig(
                api_key=CONFIG["crossmint_api_key"],
                api_base=CONFIG["crossmint_api_base"],
                collection=CONFIG["crossmint_collection"],
            ),
            polling=PollingConfig(
                interval_seconds=CONFIG["poll_interval_seconds"],
                mint_max_attempts=CONFIG["mint_max_attempts"],
                http_timeout_seconds=CONFIG["http_timeout_seconds"],
            ),
        )

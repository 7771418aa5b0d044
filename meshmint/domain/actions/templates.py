"""Prompt templates for parameter extraction.

Each template carries a one-shot JSON example and a ``{{recentMessages}}``
placeholder filled by the action.
"""

TEXT_TO_3D_TEMPLATE = """Extract the key features for 3D model generation from the user's description. Return only a JSON markdown block.

Example response:
```json
{
    "prompt": "detailed monster mask with horns and sharp teeth",
    "artStyle": "realistic",
    "negativePrompt": "low quality, low resolution, low poly, ugly"
}
```

{{recentMessages}}

Given the recent messages, extract the main description and important features for the 3D model.
Focus on physical characteristics, style, and important details.
Respond with a JSON markdown block containing only the extracted values."""

MINT_NFT_TEMPLATE = """Extract the NFT details from the user's description. Return only a JSON markdown block.

Example response:
```json
{
    "name": "Cool Art NFT",
    "description": "A unique digital artwork featuring vibrant colors",
    "image": "https://picsum.photos/400",
    "recipient": "email:user@example.com:solana",
    "chain": "solana"
}
```

{{recentMessages}}

Given the recent messages, extract the NFT details including name, description, image URL, recipient (email or wallet), and chain.
The chain should be either "solana", "polygon-amoy", or "ethereum-sepolia" for testnet.
Respond with a JSON markdown block containing only the extracted values."""

MINT_3D_NFT_TEMPLATE = """Extract the NFT details from the user's message and previous 3D model generation. Return only a JSON markdown block.

Example response:
```json
{
    "name": "3D Monster Mask NFT",
    "description": "A unique 3D monster mask with horns and sharp teeth",
    "modelUrl": "https://assets.meshy.ai/models/xyz.glb",
    "recipient": "email:user@example.com:solana",
    "chain": "solana"
}
```

{{recentMessages}}

The most recent generated 3D model URL is: {{modelUrl}}

Given the recent messages and the previously generated 3D model URL, extract the NFT details.
Use the 3D model URL from the previous generation step.
The chain should be either "solana", "polygon-amoy", or "ethereum-sepolia" for testnet.
Respond with a JSON markdown block containing only the extracted values."""

BITCOIN_PRICE_TEMPLATE = """Format the bitcoin price information in a clear way. Return only a JSON markdown block.

Example response:
```json
{
    "usdPrice": "$42,000.00",
    "gbpPrice": "£33,000.00",
    "eurPrice": "€38,000.00",
    "lastUpdated": "2024-12-22 03:05 UTC"
}
```

{{recentMessages}}

Current bitcoin price data:
{{btcData}}

Given the recent messages and current bitcoin price data, format the price information in USD, GBP, and EUR along with the last update time.
Respond with a JSON markdown block containing only the formatted values."""

"""Category allow-list: which provider categories the report covers."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .core.errors import ConfigurationError

# Labels carry the token count observed when the list was curated.
DEFAULT_CATEGORIES: Mapping[str, str] = MappingProxyType(
    {
        "6433de7df79a2653906cd680": "Layer 1[120]",
        "67c514446feebc2b5bcc23f1": "US Strategic Crypto Reserve[5]",
        "604f2772ebccdd50cd175fd9": "Coinbase Ventures Portfolio[63]",
        "63feda8ad0a19758f3bde124": "Bitcoin Ecosystem[176]",
        "618c0beeb7dd913155b462f9": "Ethereum Ecosystem[3411]",
        "5fb62883c9ddcc213ed13308": "DeFi[1998]",
        "604f2753ebccdd50cd175fc1": "Stablecoin[226]",
        "6634dccba7b6f0637eec196a": "Fiat Stablecoin[26]",
        "60521ff1df5d3f36b84fbb61": "Solana Ecosystem[2212]",
        "60308028d2088f200c58a005": "BNB Chain Ecosystem[4029]",
        "6171122402ece807e8a9d3ed": "Arbitrum Ecosystem[556]",
        "60a5f6765abd81761fe58688": "Polygon Ecosystem[794]",
        "63c53f177e9034437b2a93bc": "Optimism Ecosystem[159]",
        "6051a82566fc1b42617d6dc6": "Memes[4473]",
        "6400b58c1701313dc2e853a9": "Real World Assets[159]",
        "604f2738ebccdd50cd175fac": "Decentralized Exchange (DEX) Token[194]",
        "6051a81a66fc1b42617d6db7": "AI & Big Data[779]",
        "6051a82166fc1b42617d6dc1": "Gaming[1017] (Gaming)",
        "6051a81b66fc1b42617d6db9": "Distributed Computing[130]",
        "604f2776ebccdd50cd175fdc": "Layer 2[56]",
        "63ff40541701313dc2e81ead": "Generative AI[91]",
        "6051a82366fc1b42617d6dc4": "IoT[63]",
    }
)


class AllowList(Mapping[str, str]):
    """Immutable mapping from category id to a human-readable label."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        source = DEFAULT_CATEGORIES if entries is None else entries
        self._entries: Mapping[str, str] = MappingProxyType({str(k): str(v) for k, v in source.items()})

    def __getitem__(self, category_id: str) -> str:
        return self._entries[category_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AllowList({len(self)} categories)"

    @classmethod
    def from_yaml(cls, path: Path) -> "AllowList":
        """Load an allow-list file.

        The file holds either a plain ``id: label`` mapping or the same mapping
        nested under a top-level ``categories`` key.
        """

        try:
            with open(path) as f:
                raw: Any = yaml.safe_load(f) or {}
        except OSError as exc:
            raise ConfigurationError(f"Cannot read allow-list file {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid allow-list file {path}: {exc}") from exc

        if isinstance(raw, dict) and "categories" in raw:
            raw = raw["categories"]
        if not isinstance(raw, dict):
            raise ConfigurationError(f"Allow-list file {path} must contain a mapping of category ids")
        return cls({str(k): "" if v is None else str(v) for k, v in raw.items()})


def load_allow_list(path: Path | None = None) -> AllowList:
    """Return the allow-list from ``path``, or the embedded default."""

    if path is None:
        return AllowList()
    return AllowList.from_yaml(path)

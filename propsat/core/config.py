"""
propsat/core/config.py
======================
Global configuration for propsat.
All knobs in one place.
"""
from __future__ import annotations
from dataclasses import dataclass, field

# Gate names are "<prefix><index>". The validator rejects user variables
# starting with this prefix.
DEFAULT_GATE_PREFIX = "@t"


@dataclass
class EncoderConfig:
    gate_prefix: str = DEFAULT_GATE_PREFIX


@dataclass
class SearchConfig:
    assert_root:  bool = True    # add unit clause (root gate) before searching
    record_trace: bool = False   # keep every decision/flip in a SearchTrace


@dataclass
class PropSatConfig:
    encoder: EncoderConfig = field(default_factory=EncoderConfig)
    search:  SearchConfig  = field(default_factory=SearchConfig)

    @classmethod
    def strict(cls) -> "PropSatConfig":
        """Root gate asserted: verdicts match the input formula."""
        return cls()

    @classmethod
    def reference(cls) -> "PropSatConfig":
        """Search the raw encoding; the root gate is left free."""
        cfg = cls()
        cfg.search.assert_root = False
        return cfg


# Singleton default config
DEFAULT_CONFIG = PropSatConfig()

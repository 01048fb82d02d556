"""
Config-based Batch Pipeline.
"""

from chainorder.pipeline.runner import run_pipeline, BatchRunner
from chainorder.pipeline.config_parser import load_config, BatchConfig, ChainEntry

__all__ = [
    "run_pipeline",
    "BatchRunner",
    "load_config",
    "BatchConfig",
    "ChainEntry",
]

"""
PipelineLib - Running the stencil engine from applications

This module provides the node executor registry, settings persistence,
and a background worker for interactive callers.
"""

from TS_Libs.PipelineLib.node_executors import (
    NodeExecutorRegistry,
    NodeSpec,
    get_default_registry,
    register_default_executors,
    run_stencil_chain,
)
from TS_Libs.PipelineLib.settings_store import (
    default_settings,
    reset_settings,
    save_settings,
    load_settings,
)
from TS_Libs.PipelineLib.stencil_worker import StencilWorker

__all__ = [
    "NodeExecutorRegistry",
    "NodeSpec",
    "get_default_registry",
    "register_default_executors",
    "run_stencil_chain",
    "default_settings",
    "reset_settings",
    "save_settings",
    "load_settings",
    "StencilWorker",
]

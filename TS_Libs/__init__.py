"""
TS_Libs - Tattoo Stencil Library Modules

This package contains core functionality for the Tattoo Stencil project,
organized into specialized sub-packages:

- StencilEngineLib: Pixel engine (stencil, black & white, line sketch)
- NodesLib: Import, stencil and output nodes
- PipelineLib: Executor registry, settings persistence and background worker
"""

__version__ = "0.1.0"

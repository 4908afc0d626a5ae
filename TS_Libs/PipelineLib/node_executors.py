"""
Node executors for the stencil chain.

Each node type maps to an executor with the signature
``(node_dict, inputs) -> result`` and the number of upstream results it
consumes. The chain is always image import -> stencil -> output.

Classes:
    NodeSpec: Executor plus its input arity
    NodeExecutorRegistry: Node type -> NodeSpec lookup

Functions:
    get_default_registry: Registry holding the three built-in nodes (singleton)
    register_default_executors: Register the built-in nodes
    run_stencil_chain: Run import -> stencil -> output through a registry
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional
import logging

from TS_Libs.constants import (
    NODE_TYPE_IMAGE_IMPORT,
    NODE_TYPE_OUTPUT,
    NODE_TYPE_STENCIL,
)

logger = logging.getLogger(__name__)

ExecutorFunction = Callable[[Dict[str, Any], List[Any]], Any]


@dataclass(frozen=True)
class NodeSpec:
    """How to run one node type.

    Attributes:
        executor: Callable taking (node_dict, inputs)
        input_count: Upstream results the node consumes (0 for the import node)
    """
    executor: ExecutorFunction
    input_count: int = 1


class NodeExecutorRegistry:
    """Looks up and runs node executors by node type."""

    def __init__(self):
        self._specs: Dict[str, NodeSpec] = {}

    def register(self, node_type: str, executor: ExecutorFunction, input_count: int = 1) -> None:
        """
        Register a node executor.

        Raises:
            ValueError: If node_type is empty, executor is not callable or
                input_count is negative
            RuntimeError: If node_type is already registered
        """
        node_type = str(node_type).strip()
        if not node_type:
            raise ValueError("node_type cannot be empty")
        if not callable(executor):
            raise ValueError(f"executor must be callable, got {type(executor)}")
        if input_count < 0:
            raise ValueError(f"input_count must be >= 0, got {input_count}")
        if node_type in self._specs:
            raise RuntimeError(f"Node type '{node_type}' is already registered")

        self._specs[node_type] = NodeSpec(executor, int(input_count))
        logger.debug(f"Registered executor for node type: {node_type}")

    def get_spec(self, node_type: str) -> NodeSpec:
        """
        Raises:
            KeyError: If node_type is not registered
        """
        node_type = str(node_type).strip()
        if node_type not in self._specs:
            available = ", ".join(self.node_types())
            raise KeyError(
                f"No executor registered for node type '{node_type}'. "
                f"Available types: {available}"
            )
        return self._specs[node_type]

    def execute(self, node_type: str, node_dict: Dict[str, Any], inputs: List[Any]) -> Any:
        """
        Run a node.

        Raises:
            KeyError: If node_type is not registered
            ValueError: If the number of inputs does not match the node type
        """
        spec = self.get_spec(node_type)
        if len(inputs) != spec.input_count:
            raise ValueError(
                f"Node type '{node_type}' takes {spec.input_count} input(s), "
                f"got {len(inputs)}"
            )
        return spec.executor(node_dict, inputs)

    def node_types(self) -> List[str]:
        return sorted(self._specs)


_default_registry: Optional[NodeExecutorRegistry] = None


def get_default_registry() -> NodeExecutorRegistry:
    """Get the global registry, registering the built-in nodes on first use."""
    global _default_registry

    if _default_registry is None:
        _default_registry = NodeExecutorRegistry()
        register_default_executors(_default_registry)

    return _default_registry


def register_default_executors(registry: NodeExecutorRegistry) -> None:
    """Register the image import, stencil and output nodes."""
    from TS_Libs.NodesLib.image_import_node import execute_import_image_node
    from TS_Libs.NodesLib.stencil_node import execute_stencil_node
    from TS_Libs.NodesLib.output_node import execute_output_node

    registry.register(NODE_TYPE_IMAGE_IMPORT, execute_import_image_node, input_count=0)
    registry.register(NODE_TYPE_STENCIL, execute_stencil_node)
    registry.register(NODE_TYPE_OUTPUT, execute_output_node)

    logger.info("Registered default node executors")


def run_stencil_chain(
    import_node: Dict[str, Any],
    stencil_node: Dict[str, Any],
    output_node: Dict[str, Any],
    registry: Optional[NodeExecutorRegistry] = None,
) -> Any:
    """
    Execute an import -> stencil -> output chain.

    Args:
        import_node: Image import node dict
        stencil_node: Stencil node dict
        output_node: Output node dict
        registry: Registry to use (default: the global registry)

    Returns:
        Whatever the output node returns (written paths for the built-in node)

    Raises:
        Exception: Wraps any node failure with the failing node's id
    """
    registry = registry or get_default_registry()

    previous: List[Any] = []
    for node in (import_node, stencil_node, output_node):
        node_id = str(node.get("id", node.get("type", "")))
        try:
            output = registry.execute(node.get("type", ""), node, previous)
        except Exception as e:
            # Re-raise with node context
            raise Exception(f"Error executing node {node_id}: {str(e)}") from e
        previous = [output]

    return previous[0]

"""agentnet — compiler for declarative networks of cooperating AI agents."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from agentnet.core.network.compiler import compile_network as compile_network
    from agentnet.core.network.compiler import load_and_compile as load_and_compile
    from agentnet.core.network.cycles import detect_cycles as detect_cycles
    from agentnet.core.network.loader import load_network as load_network

_EXPORTS = {
    "compile_network": "agentnet.core.network.compiler",
    "load_and_compile": "agentnet.core.network.compiler",
    "detect_cycles": "agentnet.core.network.cycles",
    "load_network": "agentnet.core.network.loader",
}


def __getattr__(name: str) -> object:
    module_path = _EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'agentnet' has no attribute {name!r}")

"""Contracts implemented by adapters."""

from drone_client.core.interfaces.executor import RequestExecutor

__all__ = ["RequestExecutor"]

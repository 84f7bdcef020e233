"""
Request pipeline: registry, serial executor, verification, transport, client.
"""

from .config import TransportConfig
from .http import HTTPClient, default_error_mapper
from .registry import RequestRegistry
from .response import WireResponse, process_response
from .serial import SerialExecutor
from .transport import HttpxTransport, Transport
from .verify import Completion, run_verification

__all__ = (
    "HTTPClient",
    "default_error_mapper",
    "RequestRegistry",
    "SerialExecutor",
    "WireResponse",
    "process_response",
    "Completion",
    "run_verification",
    "Transport",
    "HttpxTransport",
    "TransportConfig",
)

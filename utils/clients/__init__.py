# Clients subpackage - External API clients
from .claude import call_anthropic_api_with_retry, extract_text, get_anthropic_client
from .dataforseo import BacklinksClient
from .lighthouse import LighthouseRunner, shape_report

__all__ = [
    "call_anthropic_api_with_retry",
    "extract_text",
    "get_anthropic_client",
    "BacklinksClient",
    "LighthouseRunner",
    "shape_report",
]

"""
Exception types raised by the SEO Analyzer components.

Handlers in routes.py translate these into HTTP responses; the original
exception is always chained so it stays in the server logs.
"""


class SEOAnalyzerError(Exception):
    """Base class for all service errors"""


class ConfigurationError(SEOAnalyzerError):
    """Raised at startup when required settings are missing"""


class AnalysisError(SEOAnalyzerError):
    """Raised when a page cannot be loaded or its content extracted"""


class AuditError(SEOAnalyzerError):
    """Raised when the Lighthouse run fails or produces an unusable report"""


class RecommendationError(SEOAnalyzerError):
    """Raised when the language-model call fails"""


class BacklinksError(SEOAnalyzerError):
    """Raised when the backlinks provider cannot be reached or rejects the request"""


class IndexingError(SEOAnalyzerError):
    """Raised when a document index rebuild aborts"""


class IndexNotReadyError(SEOAnalyzerError):
    """Raised when a question is asked before the document index is ready"""

    def __init__(self, state: str):
        super().__init__(f"Document index is not ready (state: {state})")
        self.state = state

"""Global search engine instance to avoid circular imports."""

from .config import get_settings
from .core.engine import SearchEngine
from .manifests import build_index
from .models.payload import SearchMessages

# Global search engine instance
settings = get_settings()
search_engine = SearchEngine(
    build_index(settings.manifest),
    min_query_length=settings.min_query_length,
    summary_size=settings.keyword_summary_size,
    messages=SearchMessages(
        prompt_message=settings.prompt_message,
        prompt_hint=settings.prompt_hint,
        no_results_message=settings.no_results_message,
        no_results_hint=settings.no_results_hint,
    ),
)

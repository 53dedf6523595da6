from .extractor import (
    NAME_PATTERNS,
    NamePattern,
    clean_name,
    extract_all_prospect_candidates,
    extract_candidates,
    extract_prospect_name,
    get_extraction_stats,
    is_likely_customer,
    validate_name,
)

__all__ = [
    "NAME_PATTERNS",
    "NamePattern",
    "clean_name",
    "extract_all_prospect_candidates",
    "extract_candidates",
    "extract_prospect_name",
    "get_extraction_stats",
    "is_likely_customer",
    "validate_name",
]

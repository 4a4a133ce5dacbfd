from postboard.db.filters.filters import KeywordColumnsType, generic_keyword_filter

__all__ = [
    "KeywordColumnsType",
    "generic_keyword_filter",
]

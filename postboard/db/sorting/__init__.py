from postboard.db.sorting.sorting import (
    ColumnResolver,
    QueryType,
    Sort,
    SortOrder,
    apply_sorting,
    column_resolver,
    create_memoized_field_list,
    generic_sort,
    generic_sorts_validate,
    parse_sort_params,
    table_sort_columns,
)

__all__ = [
    "ColumnResolver",
    "QueryType",
    "Sort",
    "SortOrder",
    "apply_sorting",
    "column_resolver",
    "create_memoized_field_list",
    "generic_sort",
    "generic_sorts_validate",
    "parse_sort_params",
    "table_sort_columns",
]

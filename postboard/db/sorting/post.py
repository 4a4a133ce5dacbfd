from postboard.db import PostTable
from postboard.db.sorting import (
    Sort,
    SortOrder,
    column_resolver,
    create_memoized_field_list,
    generic_sort,
    generic_sorts_validate,
    table_sort_columns,
)
from postboard.types import PostSortField

_post_columns = table_sort_columns(PostTable)

POST_SORT_COLUMNS = {field.value: _post_columns[field.value] for field in PostSortField}

DEFAULT_POST_SORT = [Sort(field=PostSortField.ID.value, order=SortOrder.DESC)]

post_sort_fields = create_memoized_field_list(POST_SORT_COLUMNS)
resolve_post_sort_column = column_resolver(POST_SORT_COLUMNS)
validate_post_sorts = generic_sorts_validate(resolve_post_sort_column)
sort_posts = generic_sort(POST_SORT_COLUMNS)

from postboard.db import MemberTable
from postboard.db.sorting import (
    Sort,
    SortOrder,
    column_resolver,
    create_memoized_field_list,
    generic_sort,
    generic_sorts_validate,
    table_sort_columns,
)
from postboard.types import MemberSortField

_member_columns = table_sort_columns(MemberTable)

MEMBER_SORT_COLUMNS = {field.value: _member_columns[field.value] for field in MemberSortField}

DEFAULT_MEMBER_SORT = [Sort(field=MemberSortField.ID.value, order=SortOrder.DESC)]

member_sort_fields = create_memoized_field_list(MEMBER_SORT_COLUMNS)
resolve_member_sort_column = column_resolver(MEMBER_SORT_COLUMNS)
validate_member_sorts = generic_sorts_validate(resolve_member_sort_column)
sort_members = generic_sort(MEMBER_SORT_COLUMNS)

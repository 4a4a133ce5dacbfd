from postboard.db import MemberTable
from postboard.db.filters import generic_keyword_filter
from postboard.types import MemberSearchKeywordType

MEMBER_KEYWORD_COLUMNS = {
    MemberSearchKeywordType.USERNAME: [MemberTable.username],
    MemberSearchKeywordType.NICKNAME: [MemberTable.nickname],
    MemberSearchKeywordType.ALL: [MemberTable.username, MemberTable.nickname],
}

filter_members = generic_keyword_filter(MEMBER_KEYWORD_COLUMNS)

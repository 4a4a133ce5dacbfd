from sqlalchemy import Select, select

from postboard.db import MemberTable, PostBodyTable, PostTable
from postboard.db.filters import generic_keyword_filter
from postboard.types import PostSearchKeywordType

POST_KEYWORD_COLUMNS = {
    PostSearchKeywordType.TITLE: [PostTable.title],
    PostSearchKeywordType.CONTENT: [PostBodyTable.content],
    PostSearchKeywordType.AUTHOR_NICKNAME: [MemberTable.nickname],
    PostSearchKeywordType.ALL: [PostTable.title, PostBodyTable.content, MemberTable.nickname],
}


def select_listed_posts() -> Select:
    """Select the publicly listed posts, joined with the tables the keyword filter searches."""
    return select(PostTable).join(PostTable.author).join(PostTable.body).where(PostTable.listed.is_(True))


filter_posts = generic_keyword_filter(POST_KEYWORD_COLUMNS)

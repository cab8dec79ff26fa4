"""
Length capping for extracted page content so prompts stay short.
"""

from models import PageContent, PageLink, PageList, SummarizedPageContent

ELLIPSIS = "..."

PARAGRAPH_MAX_LENGTH = 200
LIST_ITEM_MAX_LENGTH = 100
LINK_TEXT_MAX_LENGTH = 50


def summarize(content: str, max_length: int) -> str:
    """Return content unchanged if it fits, else its head plus an ellipsis, max_length long."""
    if max_length < len(ELLIPSIS):
        raise ValueError(f"max_length must be at least {len(ELLIPSIS)}")
    if len(content) <= max_length:
        return content
    return content[: max_length - len(ELLIPSIS)] + ELLIPSIS


def summarize_page_content(content: PageContent) -> SummarizedPageContent:
    """
    Cap paragraphs, list items and link text. Title, meta description,
    headings and image alt text pass through untouched.
    """
    return SummarizedPageContent(
        title=content.title,
        meta_description=content.meta_description,
        headings={level: list(texts) for level, texts in content.headings.items()},
        paragraphs=[summarize(p, PARAGRAPH_MAX_LENGTH) for p in content.paragraphs],
        lists=[
            PageList(
                type=page_list.type,
                items=[summarize(item, LIST_ITEM_MAX_LENGTH) for item in page_list.items],
            )
            for page_list in content.lists
        ],
        links=[
            PageLink(href=link.href, text=summarize(link.text, LINK_TEXT_MAX_LENGTH))
            for link in content.links
        ],
        images=list(content.images),
    )

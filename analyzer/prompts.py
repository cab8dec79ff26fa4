"""
SEO Recommendation Prompts for Claude API

Builds the content-analysis prompt and the Lighthouse feedback prompt.
"""

import json
from typing import List

from models import AuditCheck, SummarizedPageContent

MAX_PROMPT_AUDITS = 5

SEO_FOCUS_AREAS = [
    "Meta tags optimization",
    "Heading structure and content hierarchy",
    "Paragraph content, keyword usage, and readability",
    "List structure and content relevance",
    "Internal and external linking strategy",
    "Image optimization (alt tags, file names)",
    "Content organization and user experience",
    "Keyword placement, density, and semantic relevance",
    "Mobile-friendliness considerations",
    "Page load speed implications (based on content structure)",
]


def build_content_prompt(content: SummarizedPageContent, url: str) -> str:
    """
    Generate the SEO analysis prompt for extracted page content.

    Args:
        content: Summarized page content
        url: URL the content was extracted from

    Returns:
        Complete prompt string for Claude
    """
    headings = "\n".join(
        f"H{level}: {' | '.join(content.headings.get(level, []))}"
        for level in range(1, 7)
    )
    paragraphs = "\n\n".join(content.paragraphs)
    lists = json.dumps([page_list.model_dump() for page_list in content.lists], indent=2)
    links = json.dumps([link.model_dump() for link in content.links], indent=2)
    images = json.dumps([image.model_dump() for image in content.images], indent=2)
    focus_areas = "\n".join(
        f"{i}. {area}" for i, area in enumerate(SEO_FOCUS_AREAS, 1)
    )

    return f"""Analyze the following website content for SEO optimizations:

URL: {url}

Title: {content.title}
Meta Description: {content.meta_description}

Headings:
{headings}

Paragraphs:
{paragraphs}

Lists:
{lists}

Links: {links}

Images: {images}

Provide a comprehensive SEO analysis and improvement plan based on this content. Focus on:
{focus_areas}

For each area, provide detailed, actionable recommendations and explain their potential impact on SEO. Consider both on-page and technical SEO factors in your analysis."""


def select_audits_for_prompt(
    audits: List[AuditCheck], limit: int = MAX_PROMPT_AUDITS
) -> List[AuditCheck]:
    """Keep checks with a positive score, skipping 0 and not-applicable, in received order."""
    return [a for a in audits if a.score is not None and a.score != 0][:limit]


def build_audit_prompt(audits: List[AuditCheck]) -> str:
    """
    Generate the Lighthouse feedback prompt.

    Args:
        audits: Checks already filtered with select_audits_for_prompt()

    Returns:
        Complete prompt string for Claude
    """
    audits_json = json.dumps(
        [a.model_dump(by_alias=True, exclude_none=True) for a in audits], indent=2
    )

    return f"""Analyze the following Lighthouse results for a website and provide detailed, actionable feedback on how to improve the most critical issues:

Audits:
{audits_json}

For each of the top 3-5 most critical issues:

1. Present the issue in the following format:

Problem:
[Clearly state the issue and its impact on the website's performance, accessibility, best practices, or SEO]

Solution:
- [Provide specific, actionable steps to resolve the issue]
- [Include any quick wins or easy fixes that could significantly improve the score]
- [Explain why each step is important and how it contributes to solving the problem]

2. Prioritize the most impactful recommendations that will have the greatest effect on improving the site's overall performance and user experience.

3. Ensure that the solutions are practical and implementable, providing enough detail for a web developer or site owner to follow and improve their site.

Limit your response to about 1000 words, focusing on the most critical issues and their solutions."""

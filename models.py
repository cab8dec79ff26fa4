from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, HttpUrl


# Page content models
class PageList(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["ordered", "unordered"]
    items: List[str] = []


class PageLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    href: str
    text: str = ""


class PageImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    alt: str = ""


class PageContent(BaseModel):
    """SEO-relevant content pulled from a rendered page, in document order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = ""
    meta_description: str = Field(default="", alias="metaDescription")
    headings: Dict[int, List[str]] = Field(
        default_factory=lambda: {level: [] for level in range(1, 7)}
    )
    paragraphs: List[str] = []
    lists: List[PageList] = []
    links: List[PageLink] = []
    images: List[PageImage] = []


class SummarizedPageContent(PageContent):
    """PageContent with paragraphs, list items and link text length-capped."""


# Audit models
class CheckRef(BaseModel):
    id: str
    weight: float
    group: Optional[str] = None


class AuditCategoryResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category: str
    score: int = Field(ge=0, le=100)
    title: str
    description: str = ""
    manual_description: Optional[str] = Field(default=None, alias="manualDescription")
    check_refs: List[CheckRef] = Field(default=[], alias="checkRefs")


class AuditCheck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str = ""
    score: Optional[float] = None  # None means "not applicable", distinct from 0
    score_display_mode: Optional[str] = Field(default=None, alias="scoreDisplayMode")
    display_value: Optional[str] = Field(default=None, alias="displayValue")
    numeric_value: Optional[float] = Field(default=None, alias="numericValue")
    numeric_unit: Optional[str] = Field(default=None, alias="numericUnit")


class AuditReport(BaseModel):
    categories: List[AuditCategoryResult]
    audits: List[AuditCheck]


# Request / response models
class UrlRequest(BaseModel):
    url: HttpUrl


class QuestionRequest(BaseModel):
    question: str = Field(min_length=1)


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    screenshot: str
    seo_analysis: str = Field(alias="seoAnalysis")


class ScreenshotResponse(BaseModel):
    screenshot: str


class LighthouseResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    lighthouse_results: List[AuditCategoryResult] = Field(alias="lighthouseResults")
    lighthouse_audits: List[AuditCheck] = Field(alias="lighthouseAudits")
    feedback: str


class InitResponse(BaseModel):
    status: str
    chunks: int


class QuestionResponse(BaseModel):
    answer: str

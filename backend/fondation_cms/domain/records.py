# fondation_cms/domain/records.py
from __future__ import annotations

from typing import Any, Dict, List, NotRequired, TypedDict


LANGUAGES = ("fr", "ar")


class TranslatedText(TypedDict):
    fr: str
    ar: str


class PageSection(TypedDict):
    """
    One block of a page.

    Sections are identified by `id` inside their page; list order is
    display order.
    """
    id: str
    title: NotRequired[TranslatedText]
    content: TranslatedText
    image: NotRequired[str]
    metadata: NotRequired[Dict[str, Any]]


class PageContent(TypedDict):
    id: str
    title: TranslatedText
    sections: List[PageSection]


class NewsItem(TypedDict):
    id: int
    title: TranslatedText
    date: TranslatedText
    author: TranslatedText
    category: TranslatedText
    excerpt: TranslatedText
    image: str
    slug: str
    content: str


class Resource(TypedDict):
    id: int
    title: TranslatedText
    description: TranslatedText
    type: str
    format: str
    thumbnail: NotRequired[str]
    downloadUrl: str
    date: TranslatedText
    fileSize: NotRequired[str]
    featured: NotRequired[bool]


class PublicationType(TypedDict):
    id: str
    fr: str
    ar: str


class Publication(TypedDict):
    id: int
    title: TranslatedText
    date: TranslatedText
    excerpt: TranslatedText
    category: PublicationType
    type: PublicationType
    pages: int
    image: NotRequired[str]
    slug: str
    pdfUrl: str
    views: NotRequired[int]
    listens: NotRequired[int]
    downloads: NotRequired[int]
    featured: NotRequired[bool]
    duration: NotRequired[str]


class GlobalContent(TypedDict):
    id: str
    category: str  # buttons, labels, errors, ...
    key: str
    text: TranslatedText
    image: NotRequired[str]


class MediaItem(TypedDict):
    id: str
    name: str
    path: str
    url: str
    type: str  # image, video, document
    alt: TranslatedText
    tags: List[str]
    uploadDate: str


class MenuItem(TypedDict):
    id: str
    title: TranslatedText
    href: str
    children: NotRequired[List["MenuItem"]]


class FooterLink(TypedDict):
    text: TranslatedText
    href: str


class FooterSection(TypedDict):
    id: str
    title: TranslatedText
    links: NotRequired[List[FooterLink]]
    content: NotRequired[TranslatedText]


class WebsiteStructure(TypedDict):
    pages: List[str]
    mainMenu: List[MenuItem]
    footer: List[FooterSection]


class RecentEdit(TypedDict):
    id: int
    page: str
    date: str
    user: str


def translated(fr: str, ar: str) -> TranslatedText:
    return {"fr": fr, "ar": ar}

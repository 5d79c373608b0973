"""Book model mirroring mdbook's JSON representation."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from ..exceptions import ProtocolError

CHAPTER_FIELDS = ("name", "content", "number", "sub_items", "path", "source_path", "parent_names")


@dataclass
class Chapter:
    """A chapter of the book. Only `content` is rewritten."""
    name: str
    content: str = ""
    number: Optional[List[int]] = None
    sub_items: List["BookItem"] = field(default_factory=list)
    path: Optional[str] = None
    source_path: Optional[str] = None
    parent_names: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Chapter":
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            raise ProtocolError(f"Invalid chapter: {data!r}")
        name = data["name"]
        content = data.get("content", "")
        if not isinstance(content, str):
            raise ProtocolError(f"Chapter '{name}' has non-string content: {content!r}")
        for key in ("sub_items", "parent_names"):
            if not isinstance(data.get(key, []), list):
                raise ProtocolError(f"Chapter '{name}' has a non-list '{key}'")
        return cls(
            name=name,
            content=content,
            number=data.get("number"),
            sub_items=[item_from_dict(item) for item in data.get("sub_items", [])],
            path=data.get("path"),
            source_path=data.get("source_path"),
            parent_names=list(data.get("parent_names", [])),
            extra={k: v for k, v in data.items() if k not in CHAPTER_FIELDS}
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "name": self.name,
            "content": self.content,
            "number": self.number,
            "sub_items": [item_to_dict(item) for item in self.sub_items],
            "path": self.path,
            "source_path": self.source_path,
            "parent_names": self.parent_names,
        }
        data.update(self.extra)
        return data


@dataclass
class Separator:
    """A horizontal separator in the table of contents."""


@dataclass
class PartTitle:
    """A part heading in the table of contents."""
    title: str


BookItem = Union[Chapter, Separator, PartTitle]


def item_from_dict(data: Any) -> BookItem:
    """Convert one serialized book item into its model."""
    if data == "Separator":
        return Separator()
    if isinstance(data, dict) and len(data) == 1:
        kind, value = next(iter(data.items()))
        if kind == "Chapter":
            return Chapter.from_dict(value)
        if kind == "PartTitle" and isinstance(value, str):
            return PartTitle(value)
        if kind == "Separator":
            return Separator()
    raise ProtocolError(f"Unknown book item: {data!r}")


def item_to_dict(item: BookItem) -> Any:
    """Convert a book item back into mdbook's JSON shape."""
    if isinstance(item, Chapter):
        return {"Chapter": item.to_dict()}
    if isinstance(item, PartTitle):
        return {"PartTitle": item.title}
    return "Separator"


@dataclass
class Book:
    """The full book handed over by mdbook."""
    sections: List[BookItem] = field(default_factory=list)
    sections_key: str = "sections"
    extra: Dict[str, Any] = field(default_factory=lambda: {"__non_exhaustive": None})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Book":
        if not isinstance(data, dict):
            raise ProtocolError(f"Expected a book object, got {type(data).__name__}")
        sections = data.get("sections", data.get("items"))
        if not isinstance(sections, list):
            raise ProtocolError("Book has no list of sections")
        key = "sections" if "sections" in data else "items"
        return cls(
            sections=[item_from_dict(item) for item in sections],
            sections_key=key,
            extra={k: v for k, v in data.items() if k != key}
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {self.sections_key: [item_to_dict(item) for item in self.sections]}
        data.update(self.extra)
        return data

    def iter_chapters(self) -> Iterator[Chapter]:
        """Yield every chapter depth-first, parents before their sub-items."""
        stack = list(reversed(self.sections))
        while stack:
            item = stack.pop()
            if isinstance(item, Chapter):
                yield item
                stack.extend(reversed(item.sub_items))

    def for_each_chapter(self, func: Callable[[Chapter], None]) -> None:
        """Apply func to every chapter, letting it mutate the chapter in place."""
        for chapter in self.iter_chapters():
            func(chapter)

"""
reference.py — Category and location trees from the explore pickers.

Both are recursive and treated as immutable once decoded.
"""

from typing import Iterator, Optional

from pydantic import Field

from gtrends.models.base import WireModel


class CategoryNode(WireModel):
    name: str = ""
    id: int = 0
    children: list["CategoryNode"] = Field(default_factory=list)

    def walk(self) -> Iterator["CategoryNode"]:
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, category_id: int) -> Optional["CategoryNode"]:
        return next((node for node in self.walk() if node.id == category_id), None)


class LocationNode(WireModel):
    name: str = ""
    id: str = ""  # "US", "US-CA"
    children: list["LocationNode"] = Field(default_factory=list)

    def walk(self) -> Iterator["LocationNode"]:
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, code: str) -> Optional["LocationNode"]:
        return next((node for node in self.walk() if node.id == code), None)

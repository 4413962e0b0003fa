from __future__ import annotations

from html import escape

from transforms.countries import ImageReference


class Container:
    """
    In-memory container element. Holds attached image references in insertion order.
    """

    def __init__(self, element_id: str) -> None:
        self.element_id = element_id
        self._children: list[ImageReference] = []

    @property
    def children(self) -> list[ImageReference]:
        return list(self._children)

    def append(self, ref: ImageReference) -> None:
        self._children.append(ref)

    def render_html(self) -> str:
        imgs = []
        for ref in self._children:
            attrs = f' src="{escape(ref.src)}"' if ref.src else ""
            if ref.alt:
                attrs += f' alt="{escape(ref.alt)}"'
            imgs.append(f"<img{attrs}>")
        inner = "".join(imgs)
        return f'<div id="{escape(self.element_id)}">{inner}</div>'


class Document:
    def __init__(self, element_ids: list[str] | None = None) -> None:
        self._elements: dict[str, Container] = {}
        for element_id in element_ids or []:
            self._elements[element_id] = Container(element_id)

    def get_element_by_id(self, element_id: str) -> Container | None:
        return self._elements.get(element_id)

    def render_html(self, *, title: str = "Flags") -> str:
        body = "\n".join(c.render_html() for c in self._elements.values())
        return (
            "<!DOCTYPE html>\n"
            f"<html><head><meta charset=\"utf-8\"><title>{escape(title)}</title></head>\n"
            f"<body>\n{body}\n</body></html>\n"
        )

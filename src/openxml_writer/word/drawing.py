"""Inline pictures (w:drawing).

Only the inline picture shape is modeled: one embedded image referenced by
relationship id, sized in EMU, with no cropping, effects or wrapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from lxml import etree

from openxml_writer.namespaces import DRAWINGML_PICTURE
from openxml_writer.word.text import RunChildKind
from openxml_writer.xml import XmlElement, check_xml_text, make_element

EMU_PER_PIXEL = 9525


@dataclass(frozen=True)
class Drawing(XmlElement):
    """An inline picture anchored in a run."""

    rel_id: str  # Relationship ID of the image part
    width: int  # EMU
    height: int  # EMU
    id: int  # Drawing object id; callers keep it unique within the document
    name: str = ""

    kind: ClassVar[RunChildKind] = RunChildKind.DRAWING

    def __post_init__(self) -> None:
        if self.id < 1:
            raise ValueError(f"Drawing id must be positive, got {self.id}")
        check_xml_text(self.rel_id, "rel_id")
        check_xml_text(self.name, "name")

    @classmethod
    def from_pixels(
        cls, rel_id: str, width: int, height: int, id: int, name: str = ""
    ) -> Drawing:
        return cls(rel_id, width * EMU_PER_PIXEL, height * EMU_PER_PIXEL, id, name)

    def to_element(self, parent: etree._Element | None = None) -> etree._Element:
        drawing = make_element("w:drawing", parent)
        inline = make_element(
            "wp:inline", drawing, {"distT": 0, "distB": 0, "distL": 0, "distR": 0}
        )
        make_element("wp:extent", inline, {"cx": self.width, "cy": self.height})
        make_element("wp:effectExtent", inline, {"l": 0, "t": 0, "r": 0, "b": 0})
        make_element("wp:docPr", inline, {"id": self.id, "name": self.name})
        frame = make_element("wp:cNvGraphicFramePr", inline)
        make_element("a:graphicFrameLocks", frame, {"noChangeAspect": 1})

        graphic = make_element("a:graphic", inline)
        data = make_element("a:graphicData", graphic, {"uri": DRAWINGML_PICTURE})
        pic = make_element("pic:pic", data)

        nv_pic = make_element("pic:nvPicPr", pic)
        make_element("pic:cNvPr", nv_pic, {"id": 0, "name": self.name})
        nv_props = make_element("pic:cNvPicPr", nv_pic)
        make_element("a:picLocks", nv_props, {"noChangeAspect": 1, "noChangeArrowheads": 1})

        fill = make_element("pic:blipFill", pic)
        make_element("a:blip", fill, {"r:embed": self.rel_id})
        make_element("a:srcRect", fill)
        stretch = make_element("a:stretch", fill)
        make_element("a:fillRect", stretch)

        sp_pr = make_element("pic:spPr", pic, {"bwMode": "auto"})
        xfrm = make_element("a:xfrm", sp_pr)
        make_element("a:off", xfrm, {"x": 0, "y": 0})
        make_element("a:ext", xfrm, {"cx": self.width, "cy": self.height})
        geom = make_element("a:prstGeom", sp_pr, {"prst": "rect"})
        make_element("a:avLst", geom)

        return drawing

    def to_dict(self) -> dict[str, Any]:
        return {
            "relId": self.rel_id,
            "width": self.width,
            "height": self.height,
            "id": self.id,
            "name": self.name,
        }

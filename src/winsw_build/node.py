"""This module includes the ordered tree that describes a WinSW service
descriptor before it is rendered to XML.

A tree consists of three kinds of nodes:

- :py:class:`Scalar`: an element containing only text
- :py:class:`Attributed`: an empty element carrying attributes
- :py:class:`Group`: an element containing further nodes

The order of the children of a :py:class:`Group` is preserved when rendering.

"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from dataclasses import field


@dataclass(kw_only=True, frozen=True)
class Scalar:
    """An element with text content, e.g. ``<id>foo</id>``."""

    #: name of the element
    tag: str

    #: text of the element
    text: str = ""

    def as_xml_element(self) -> ET.Element:
        elem = ET.Element(self.tag)
        elem.text = "" if self.text is None else str(self.text)
        return elem


@dataclass(kw_only=True, frozen=True)
class Attributed:
    """An empty element with attributes, e.g. ``<env name="HOME" value="C:\\"/>``."""

    #: name of the element
    tag: str

    #: attributes of the element as a list of tuples where the first value is
    #: the attribute's name and the second its value
    attributes: list[tuple[str, str]] = field(default_factory=list)

    def as_xml_element(self) -> ET.Element:
        return ET.Element(
            self.tag,
            attrib={name: str(val) for name, val in self.attributes if val is not None},
        )


@dataclass(kw_only=True, frozen=True)
class Group:
    """An element containing an ordered list of child nodes."""

    #: name of the element
    tag: str

    #: the child nodes in document order
    children: list["DocumentNode"] = field(default_factory=list)

    def as_xml_element(self) -> ET.Element:
        """Converts this group and all of its children into a
        :py:class:`~xml.etree.ElementTree.Element`.

        """
        root = ET.Element(self.tag)
        for child in self.children:
            root.append(child.as_xml_element())
        return root

    def find_all(self, tag: str) -> list["DocumentNode"]:
        """Returns all direct children with the given ``tag``."""
        return [child for child in self.children if child.tag == tag]

    def __str__(self) -> str:
        return ET.tostring(self.as_xml_element(), encoding="unicode")


DocumentNode = Scalar | Attributed | Group

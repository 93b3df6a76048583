"""
Repository resources as exposed by the XML resource service (``/rest``).
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from ..exceptions import ResponseParseError

XmlSource = Union[str, bytes, ET.Element]


def parse_xml(source: XmlSource, expected_tag: str) -> ET.Element:
    """Parse ``source`` and check the root tag."""
    if isinstance(source, ET.Element):
        root = source
    else:
        try:
            root = ET.fromstring(source)
        except ET.ParseError as e:
            raise ResponseParseError(f"Malformed XML, expected <{expected_tag}>: {e}", content_type="text/xml")
    if root.tag != expected_tag:
        raise ResponseParseError(f"Unexpected XML root <{root.tag}>, expected <{expected_tag}>", content_type="text/xml")
    return root


def json_objects(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    """Items of the JSON array ``data[key]``; every item must be an object."""
    items = data.get(key) or []
    if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
        raise ResponseParseError(f"Expected '{key}' to be a list of JSON objects", content_type="application/json")
    return items


def _child_text(element: ET.Element, tag: str) -> Optional[str]:
    child = element.find(tag)
    if child is None:
        return None
    return child.text or ""


def _parse_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() == "true"


@dataclass
class ResourceProperty:
    """Named value attached to a resource; may nest further properties."""

    name: Optional[str] = None
    value: Optional[str] = None
    properties: List["ResourceProperty"] = field(default_factory=list)

    def get_property_by_name(self, name: str) -> Optional["ResourceProperty"]:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    @classmethod
    def from_xml(cls, element: ET.Element) -> "ResourceProperty":
        return cls(
            name=element.get("name"),
            value=_child_text(element, "value"),
            properties=[cls.from_xml(child) for child in element.findall("resourceProperty")],
        )

    def to_xml(self) -> ET.Element:
        element = ET.Element("resourceProperty")
        if self.name is not None:
            element.set("name", self.name)
        if self.value is not None:
            ET.SubElement(element, "value").text = self.value
        for prop in self.properties:
            element.append(prop.to_xml())
        return element


@dataclass
class ResourceParameter:
    """Parameter sent along with a resource request, e.g. a report input value."""

    name: str
    value: str
    is_list_item: bool = False

    @classmethod
    def from_xml(cls, element: ET.Element) -> "ResourceParameter":
        return cls(
            name=element.get("name", ""),
            value=element.text or "",
            is_list_item=_parse_bool(element.get("isListItem")),
        )

    def to_xml(self) -> ET.Element:
        element = ET.Element("parameter", {"name": self.name, "isListItem": str(self.is_list_item).lower()})
        element.text = self.value
        return element


@dataclass
class ResourceDescriptor:
    """A repository resource (folder, report unit, input control, ...)."""

    PROP_QUERY_DATA = "PROP_QUERY_DATA"
    PROP_QUERY_DATA_ROW = "PROP_QUERY_DATA_ROW"
    PROP_QUERY_DATA_ROW_COLUMN = "PROP_QUERY_DATA_ROW_COLUMN"

    name: Optional[str] = None
    label: Optional[str] = None
    description: Optional[str] = None
    ws_type: Optional[str] = None
    uri_string: Optional[str] = None
    is_new: bool = False
    creation_date: Optional[str] = None
    properties: List[ResourceProperty] = field(default_factory=list)
    children: List["ResourceDescriptor"] = field(default_factory=list)
    parameters: List[ResourceParameter] = field(default_factory=list)

    def get_property_by_name(self, name: str) -> Optional[ResourceProperty]:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    @classmethod
    def from_xml(cls, source: XmlSource) -> "ResourceDescriptor":
        element = parse_xml(source, "resourceDescriptor")
        return cls(
            name=element.get("name"),
            label=_child_text(element, "label"),
            description=_child_text(element, "description"),
            ws_type=element.get("wsType"),
            uri_string=element.get("uriString"),
            is_new=_parse_bool(element.get("isNew")),
            creation_date=_child_text(element, "creationDate"),
            properties=[ResourceProperty.from_xml(child) for child in element.findall("resourceProperty")],
            children=[cls.from_xml(child) for child in element.findall("resourceDescriptor")],
            parameters=[ResourceParameter.from_xml(child) for child in element.findall("parameter")],
        )

    def to_xml(self) -> ET.Element:
        element = ET.Element("resourceDescriptor")
        for attr, value in (("name", self.name), ("wsType", self.ws_type), ("uriString", self.uri_string)):
            if value is not None:
                element.set(attr, value)
        element.set("isNew", str(self.is_new).lower())
        for tag, value in (("label", self.label), ("description", self.description), ("creationDate", self.creation_date)):
            if value is not None:
                ET.SubElement(element, tag).text = value
        for prop in self.properties:
            element.append(prop.to_xml())
        for child in self.children:
            element.append(child.to_xml())
        for parameter in self.parameters:
            element.append(parameter.to_xml())
        return element

    def to_xml_string(self) -> str:
        return ET.tostring(self.to_xml(), encoding="unicode")


@dataclass
class ResourcesList:
    resource_descriptors: List[ResourceDescriptor] = field(default_factory=list)

    @classmethod
    def from_xml(cls, source: XmlSource) -> "ResourcesList":
        root = parse_xml(source, "resourceDescriptors")
        return cls([ResourceDescriptor.from_xml(child) for child in root.findall("resourceDescriptor")])

    def __len__(self) -> int:
        return len(self.resource_descriptors)

    def __iter__(self):
        return iter(self.resource_descriptors)

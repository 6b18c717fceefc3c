"""Data models for sample metadata records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Attribute:
    """
    Free-form tag/value/units triple attached to a sample.
    """

    # Attribute tag, e.g. ``collection_date``
    tag: str

    # Attribute value
    value: Optional[str] = None

    # Ontology URI of the tag
    tag_uri: Optional[str] = None

    # Units of the value, e.g. ``m``
    units: Optional[str] = None

    # Ontology URI of the units
    units_uri: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert Attribute to dictionary."""
        return {
            "tag": self.tag,
            "value": self.value,
            "tag_uri": self.tag_uri,
            "units": self.units,
            "units_uri": self.units_uri,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Attribute":
        """Create Attribute from dictionary."""
        return cls(
            tag=str(data["tag"]),
            value=data.get("value"),
            tag_uri=data.get("tag_uri"),
            units=data.get("units"),
            units_uri=data.get("units_uri"),
        )


@dataclass
class Sample:
    """
    Sample metadata record retrieved from the submission service.

    ``name`` is ``None`` when the document carries no ``SAMPLE`` element
    and an empty string when the element has no alias.
    """

    name: Optional[str] = None

    # NCBI taxonomy identifier
    tax_id: Optional[int] = None

    # Scientific name of the organism
    organism: Optional[str] = None

    # Attributes in document order
    attributes: List[Attribute] = field(default_factory=list)

    def add_attribute(self, attribute: Attribute) -> None:
        self.attributes.append(attribute)

    def to_dict(self) -> Dict[str, Any]:
        """Convert Sample to dictionary."""
        return {
            "name": self.name,
            "tax_id": self.tax_id,
            "organism": self.organism,
            "attributes": [attribute.to_dict() for attribute in self.attributes],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Sample":
        """Create Sample from dictionary."""
        tax_id = data.get("tax_id")
        return cls(
            name=data.get("name"),
            tax_id=int(tax_id) if tax_id is not None else None,
            organism=data.get("organism"),
            attributes=[Attribute.from_dict(item) for item in data.get("attributes", [])],
        )

"""Name node parsing."""

from __future__ import annotations

from xml.etree.ElementTree import Element

from .errors import UnknownVariantError
from .fields import describe, required_text
from .models import Name
from .save_format import DEFAULT_FORMAT, SaveFormat


def parse_name(node: Element, *, fmt: SaveFormat = DEFAULT_FORMAT) -> Name:
    """Build a :class:`Name` from its node.

    The variant is chosen from the node attributes alone: an explicit null
    marker wins, then the triple and single name classes. Anything else is
    rejected with :class:`UnknownVariantError`.
    """

    names = fmt.names
    if node.get(names.null_attribute) == names.null_value:
        return Name.null(names.placeholder)

    name_class = node.get(names.class_attribute)
    if name_class == names.triple_class:
        return Name.triple(
            first=required_text(node, names.first_field),
            last=required_text(node, names.last_field),
            nick=required_text(node, names.nick_field),
        )
    if name_class == names.single_class:
        return Name.single(required_text(node, names.single_field))

    raise UnknownVariantError(node.attrib, describe(node))

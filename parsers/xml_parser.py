"""XML parser — dumps the element structure of an XML document."""
import logging

from lxml import etree

import config
from document_model import XmlComment, XmlElement, XmlNode, XmlText
from parsers import ParseResult, check_depth

logger = logging.getLogger(__name__)

NO_ROOT_NOTICE = "No root element found.\n"


def _make_parser() -> etree.XMLParser:
    # Content is already decoded text; it is re-encoded as UTF-8 below
    return etree.XMLParser(
        encoding="utf-8",
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
    )


def _qualified(tag: str, nsmap: dict) -> str:
    """Turn lxml's '{uri}local' back into 'prefix:local' as written in the source."""
    qname = etree.QName(tag)
    if qname.namespace is None:
        return qname.localname
    for prefix, uri in nsmap.items():
        if uri == qname.namespace and prefix:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def _attributes(el, parent_nsmap: dict) -> dict[str, str]:
    attrs = {}
    # lxml keeps namespace declarations out of attrib; restore those new on this element
    for prefix, uri in el.nsmap.items():
        if parent_nsmap.get(prefix) != uri:
            attrs["xmlns" if prefix is None else f"xmlns:{prefix}"] = uri
    for key, value in el.attrib.items():
        attrs[_qualified(key, el.nsmap)] = value
    return attrs


def _append_text(children: list, content: str | None) -> None:
    """Add text, joining it onto a preceding text node (entity references split text in lxml)."""
    if not content:
        return
    if children and isinstance(children[-1], XmlText):
        children[-1] = XmlText(children[-1].content + content)
    elif content.strip():
        children.append(XmlText(content))


def _convert(el, parent_nsmap: dict, depth: int = 0) -> XmlNode | None:
    """Convert an lxml node into the document model; processing instructions are dropped."""
    check_depth(depth)
    if el.tag is etree.Comment:
        return XmlComment(el.text or "")
    if el.tag is etree.Entity:
        return XmlText(el.text or "")
    if el.tag is etree.PI:
        return None

    children: list[XmlNode] = []
    _append_text(children, el.text)
    for child in el:
        node = _convert(child, el.nsmap, depth + 1)
        if isinstance(node, XmlText):
            _append_text(children, node.content)
        elif node is not None:
            children.append(node)
        _append_text(children, child.tail)
    return XmlElement(
        name=_qualified(el.tag, el.nsmap),
        attributes=_attributes(el, parent_nsmap),
        children=children,
    )


def load_xml(content: str) -> XmlNode | None:
    """Parse XML text and return the first top-level node, or None.

    Comments before the root element count as top-level nodes; the XML
    declaration and processing instructions do not.
    """
    root = etree.fromstring(content.encode("utf-8"), _make_parser())
    for sibling in reversed(list(root.itersiblings(preceding=True))):
        if sibling.tag is etree.Comment:
            return XmlComment(sibling.text or "")
    return _convert(root, {})


def render_xml(node: XmlNode, indent: int = 0) -> str:
    check_depth(indent)
    pad = " " * (indent * config.INDENT_WIDTH)

    if isinstance(node, XmlElement):
        out = pad + "<" + node.name
        for key, value in node.attributes.items():
            out += f' {key}="{value}"'
        out += ">"

        text = node.text
        out += text if text else "\n"

        has_child_elements = False
        for child in node.element_children():
            has_child_elements = True
            out += render_xml(child, indent + 1)
        if has_child_elements:
            out += pad
        return out + f"</{node.name}>\n"

    if isinstance(node, XmlText):
        if not node.content:
            return ""
        return f"{pad}TEXT: {node.content}\n"

    if isinstance(node, XmlComment):
        return f"{pad}<!-- {node.content} -->\n"

    raise TypeError(f"Not an XML node: {type(node).__name__}")


def render_document(root: XmlNode | None) -> str:
    out = "XML Document Structure:\n"
    out += "=====================\n"
    if root is None:
        return out + NO_ROOT_NOTICE
    return out + render_xml(root)


class XMLParser:
    """Parse XML text into a structure dump, reporting grammar errors as text."""

    file_type = "XML"

    def parse(self, content: str) -> ParseResult:
        try:
            root = load_xml(content)
        except (etree.XMLSyntaxError, ValueError) as e:
            logger.warning("XML parse failed: %s", e)
            return ParseResult.failure(self.file_type, str(e))
        except RecursionError as e:
            logger.warning("XML conversion stopped: %s", e)
            return ParseResult(text=f"XML Render Error: {e}", ok=False)
        try:
            return ParseResult(render_document(root))
        except RecursionError as e:
            logger.warning("XML render stopped: %s", e)
            return ParseResult(text=f"XML Render Error: {e}", ok=False)

# Installed libraries
from lxml import etree
import regex

_declaration_regex = regex.compile(r'\A\s*(<\?xml\s[^>]*\?>)')
_declaration_bytes_regex = regex.compile(rb'\A(?:\xef\xbb\xbf)?\s*(<\?xml\s[^>]*\?>)')

def parse_document(text):
    '''
    Parses an XML document and returns its root element together with the
    literal XML declaration, which lxml does not keep.

    Args:
        text: The document as str or bytes. Bytes are decoded with the
              encoding the document declares.

    Raises:
        lxml.etree.XMLSyntaxError: text is not well-formed XML.
    '''
    if isinstance(text, bytes):
        declaration = _declaration_bytes_regex.match(text)
        if declaration is not None:
            declaration = declaration.group(1).decode('ascii', 'replace')

        parser = etree.XMLParser(remove_blank_text=False, resolve_entities=False, huge_tree=True)
        xml_root = etree.fromstring(text, parser)

        return xml_root, declaration

    if text.startswith('\ufeff'):
        text = text[1:]

    declaration = _declaration_regex.match(text)
    if declaration is not None:
        declaration = declaration.group(1)

    parser = etree.XMLParser(remove_blank_text=False, resolve_entities=False, huge_tree=True, encoding='utf-8')
    xml_root = etree.fromstring(text.encode('utf-8'), parser)

    return xml_root, declaration

def build(node):
    '''
    Serializes a node and its subtree. Tail text is left out.
    '''
    return etree.tostring(node, encoding='unicode', with_tail=False)

def build_document(xml_root, declaration=None):
    '''
    Serializes the whole tree xml_root belongs to, prolog included.

    Args:
        xml_root: Root element of the document.
        declaration (optional): XML declaration to put in front of the output.
    '''
    document = etree.tostring(xml_root.getroottree(), encoding='unicode')
    if declaration:
        document = declaration + document

    return document

def local_name(node):
    '''
    Returns the tag name of an element without its namespace. Comments and
    processing instructions have no name.
    '''
    if not isinstance(node.tag, str):
        return None
    return etree.QName(node).localname

def find_node(tag, node):
    '''
    Depth-first search for the first element named tag, node itself included.
    '''
    if node is None:
        return None

    for element in node.iter(etree.Element):
        if local_name(element) == tag:
            return element

    return None

def find_child(tag, node, attrib=None):
    '''
    Returns the first direct child element named tag whose attributes match attrib.

    Args:
        tag: Local name of the child.
        node: Parent element.
        attrib (optional): Attribute values the child must carry.
    '''
    for child in node.iterchildren(etree.Element):
        if local_name(child) != tag:
            continue
        if attrib and any(child.get(name) != value for name, value in attrib.items()):
            continue
        return child

    return None

def find_child_index(tag, node):
    '''
    Position of the first direct child named tag, or -1.
    '''
    for i, child in enumerate(node):
        if local_name(child) == tag:
            return i

    return -1

def new_element(tag, like=None):
    '''
    Creates a detached element in the same namespace as like.
    '''
    namespace = etree.QName(like).namespace if like is not None else None
    if namespace is None:
        return etree.Element(tag)

    nsmap = {prefix: uri for prefix, uri in like.nsmap.items() if uri == namespace}
    return etree.Element('{{{0}}}{1}'.format(namespace, tag), nsmap=nsmap)

# Installed libraries
from lxml import etree
import regex

# Standard Python libraries
from copy import deepcopy
import logging

# Internal Python files
from . import config
from .config import MergeSettings
from .xmltree import build, build_document, find_child, find_child_index, find_node, local_name, new_element, parse_document

logger = logging.getLogger(__name__)
logger.setLevel(getattr(logging, config.LOG_LEVEL))

XLIFF_1_2 = '1.2'
XLIFF_2_0 = '2.0'
SUPPORTED_VERSIONS = (XLIFF_1_2, XLIFF_2_0)

_source_language_attribute = {XLIFF_1_2: 'source-language', XLIFF_2_0: 'srcLang'}
_target_language_attribute = {XLIFF_1_2: 'target-language', XLIFF_2_0: 'trgLang'}
_unit_container = {XLIFF_1_2: 'body', XLIFF_2_0: 'file'}
_unit_tag = {XLIFF_1_2: 'trans-unit', XLIFF_2_0: 'unit'}
_note_key_attribute = {XLIFF_1_2: 'from', XLIFF_2_0: 'category'}

_root_tag_regex = regex.compile(r'<xliff\s')

class XLFDocument:
    '''
    XML Localisation Interchange File Format document, version 1.2 or 2.0.

    Structural queries look at the version attribute of the root first.
    Documents without a root, or with any other version, answer every query
    with None or an empty list.

    Args:
        xml_root (optional): The xml root of the document.
        declaration (optional): XML declaration the document was loaded with.
        settings (optional): MergeSettings used by merge_unit. Defaults to the
                             values in xliffsync.config.
    '''
    def __init__(self, xml_root=None, declaration=None, settings=None):
        self.xml_root = xml_root
        self.declaration = declaration
        self.settings = settings if settings is not None else MergeSettings.from_config()

    @classmethod
    def load(cls, source, settings=None):
        '''
        Loads a document from XLIFF text. Malformed XML yields a document
        without a root, which is never valid.

        Args:
            source: XLIFF document as str or bytes.
            settings (optional): MergeSettings for the document.
        '''
        try:
            xml_root, declaration = parse_document(source)
        except (etree.XMLSyntaxError, ValueError) as e:
            logger.warning('Could not parse XLIFF document: %s', e)
            return cls(settings=settings)

        return cls(xml_root, declaration, settings)

    @classmethod
    def create(cls, version, language, settings=None):
        '''
        Creates an empty document. No body or unit containers are added.

        Args:
            version: '1.2' or '2.0'.
            language: Target language of the document.
            settings (optional): MergeSettings for the document.
        '''
        if version not in SUPPORTED_VERSIONS:
            raise ValueError('Unsupported XLIFF version: {0}'.format(version))

        xml_root = etree.Element('xliff', {'version': version})

        if version == XLIFF_1_2:
            etree.SubElement(xml_root, 'file', {'target-language': language})
        else:
            xml_root.attrib['trgLang'] = language

        return cls(xml_root, settings=settings)

    @property
    def valid(self):
        return (self.xml_root is not None
                and self.version in SUPPORTED_VERSIONS
                and bool(self.source_language))

    @property
    def version(self):
        if self.xml_root is None:
            return None
        return self.xml_root.attrib.get('version')

    def _language_node(self):
        if self.xml_root is None:
            return None
        if self.version == XLIFF_1_2:
            return find_node('file', self.xml_root)
        elif self.version == XLIFF_2_0:
            return self.xml_root
        return None

    def _get_language(self, attributes):
        language_node = self._language_node()
        if language_node is None:
            return None
        return language_node.attrib.get(attributes[self.version])

    def _set_language(self, attributes, language):
        language_node = self._language_node()
        if language_node is None or not language:
            return
        language_node.attrib[attributes[self.version]] = language

    @property
    def source_language(self):
        return self._get_language(_source_language_attribute)

    @source_language.setter
    def source_language(self, language):
        self._set_language(_source_language_attribute, language)

    @property
    def target_language(self):
        return self._get_language(_target_language_attribute)

    @target_language.setter
    def target_language(self, language):
        self._set_language(_target_language_attribute, language)

    def gen_translation_units(self):
        '''
        Returns a Python generator object containing translation unit nodes
        in document order.
        '''
        if self.xml_root is None or self.version not in SUPPORTED_VERSIONS:
            return

        container = find_node(_unit_container[self.version], self.xml_root)
        if container is None:
            return

        for child in container.iterchildren(etree.Element):
            if local_name(child) == _unit_tag[self.version]:
                yield child

    @property
    def translation_units(self):
        return list(self.gen_translation_units())

    def extract(self):
        '''
        Serializes the document, or returns None if it is not valid.

        The root tag is moved onto its own line when something, such as the
        XML declaration, precedes it.

        Character references and entities come back in the form lxml writes
        them, so &apos; becomes a plain quote and &#160; a literal no-break space.
        '''
        if not self.valid:
            return None

        document = build_document(self.xml_root, self.declaration)

        root_tag = _root_tag_regex.search(document)
        if root_tag is not None and root_tag.start() > 0:
            document = document[:root_tag.start()] + '\n' + document[root_tag.start():]

        return document

    def find_translation_unit(self, unit_id):
        return next((unit for unit in self.gen_translation_units()
                     if unit.get('id') == unit_id), None)

    def find_translation_unit_by_meaning_and_source(self, meaning, source):
        return next((unit for unit in self.gen_translation_units()
                     if self.get_unit_meaning(unit) == meaning
                     and self.get_unit_source(unit) == source), None)

    def find_translation_unit_by_meaning(self, meaning):
        return next((unit for unit in self.gen_translation_units()
                     if self.get_unit_meaning(unit) == meaning), None)

    def find_translation_unit_by_meaning_and_description(self, meaning, description):
        return next((unit for unit in self.gen_translation_units()
                     if self.get_unit_meaning(unit) == meaning
                     and self.get_unit_description(unit) == description), None)

    @staticmethod
    def get_unit_id(unit):
        return unit.get('id')

    @staticmethod
    def get_unit_source(unit):
        '''
        Returns the markup of the unit's source element, inline tags included.
        '''
        source = find_node('source', unit)
        if source is None:
            return None
        return build(source)

    def _get_unit_note(self, unit, key):
        if self.version == XLIFF_1_2:
            notes = unit
        elif self.version == XLIFF_2_0:
            notes = find_node('notes', unit)
        else:
            return None

        if notes is None:
            return None

        note = find_child('note', notes, {_note_key_attribute[self.version]: key})
        if note is not None and note.text:
            return note.text

        return None

    def get_unit_meaning(self, unit):
        return self._get_unit_note(unit, 'meaning')

    def get_unit_description(self, unit):
        return self._get_unit_note(unit, 'description')

    def merge_unit(self, source_unit, target_unit=None, settings=None):
        '''
        Merges the translation state of a previous unit into a freshly
        extracted one. source_unit is changed in place and ends up with
        exactly one target. Merging twice gives a different result.

        Args:
            source_unit: The freshly extracted unit.
            target_unit (optional): The previous version of the same unit.
            settings (optional): MergeSettings overriding the document's.
        '''
        if settings is None:
            settings = self.settings

        target_node = None

        if target_unit is not None:
            if settings.preserve_target_order:
                source_attributes = dict(source_unit.attrib)
                source_unit.attrib.clear()
                for name, value in target_unit.attrib.items():
                    source_unit.set(name, value)

                if 'id' in source_attributes:
                    source_unit.set('id', source_attributes['id'])
                else:
                    source_unit.attrib.pop('id', None)

                for name, value in source_attributes.items():
                    if not source_unit.get(name):
                        source_unit.set(name, value)
            else:
                for name, value in target_unit.attrib.items():
                    if name != 'id':
                        source_unit.set(name, value)

            previous_target = find_node('target', target_unit)
            if previous_target is not None:
                target_node = deepcopy(previous_target)
                target_node.tail = None

        if target_node is None:
            target_node = new_element('target', source_unit)
            target_node.text = settings.missing_translation
            logger.debug('No previous translation for unit %s', source_unit.get('id'))

        self.append_target_node(source_unit, target_node)

    def append_target_node(self, unit, target_node):
        '''
        Puts target_node into the unit (1.2) or its segment (2.0). An existing
        target is replaced in place, otherwise the node goes right after the
        source with the source's indentation, or last if there is no source.
        '''
        if self.version == XLIFF_1_2:
            container = unit
        elif self.version == XLIFF_2_0:
            container = find_node('segment', unit)
            if container is None:
                logger.debug('Unit %s has no segment, target not placed', unit.get('id'))
                return
        else:
            return

        source_index = find_child_index('source', container)
        target_index = find_child_index('target', container)

        if target_index >= 0:
            current_target = container[target_index]
            target_node.tail = current_target.tail
            container.replace(current_target, target_node)
        elif source_index >= 0:
            source = container[source_index]
            previous = source.getprevious()
            indentation = container.text if previous is None else previous.tail
            target_node.tail = source.tail
            source.tail = indentation
            container.insert(source_index + 1, target_node)
        else:
            container.append(target_node)

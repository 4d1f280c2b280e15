# Standard Python libraries
import logging

# Internal Python files
from . import config
from .config import MergeSettings
from .xlfdocument import XLFDocument

logger = logging.getLogger(__name__)
logger.setLevel(getattr(logging, config.LOG_LEVEL))

STRATEGIES = ('id', 'meaning-source', 'meaning-description', 'meaning')

def find_previous_unit(document, previous_document, unit, strategies=STRATEGIES):
    '''
    Looks up the previous version of unit, trying each strategy in order.
    Strategies whose keys the unit does not carry are skipped.

    Args:
        document: XLFDocument unit belongs to.
        previous_document: XLFDocument holding the previous translation.
        unit: Translation unit node.
        strategies (optional): Strategy names out of STRATEGIES.
    '''
    unit_id = document.get_unit_id(unit)
    meaning = document.get_unit_meaning(unit)

    for strategy in strategies:
        previous_unit = None
        if strategy == 'id':
            if unit_id:
                previous_unit = previous_document.find_translation_unit(unit_id)
        elif strategy == 'meaning-source':
            source = document.get_unit_source(unit)
            if meaning and source:
                previous_unit = previous_document.find_translation_unit_by_meaning_and_source(meaning, source)
        elif strategy == 'meaning-description':
            description = document.get_unit_description(unit)
            if meaning and description:
                previous_unit = previous_document.find_translation_unit_by_meaning_and_description(meaning, description)
        elif strategy == 'meaning':
            if meaning:
                previous_unit = previous_document.find_translation_unit_by_meaning(meaning)
        else:
            raise ValueError('Unknown matching strategy: {0}'.format(strategy))

        if previous_unit is not None:
            logger.debug('Unit %s matched by %s', unit_id, strategy)
            return previous_unit

    return None

def synchronize(source, target=None, target_language=None, settings=None, strategies=None):
    '''
    Merges the translations of a previous XLIFF document into a freshly
    extracted one and returns the merged document as text.

    Args:
        source: Freshly extracted XLIFF text.
        target (optional): Previously translated XLIFF text.
        target_language (optional): Target language of the merged document.
                                    Defaults to the previous document's.
        settings (optional): MergeSettings. Defaults to xliffsync.config.
        strategies (optional): Matching strategies. Defaults to config.MATCHING_STRATEGIES.

    Returns:
        The merged document, or None if source is not a valid document.
    '''
    if settings is None:
        settings = MergeSettings.from_config()
    if strategies is None:
        strategies = config.MATCHING_STRATEGIES

    for strategy in strategies:
        if strategy not in STRATEGIES:
            raise ValueError('Unknown matching strategy: {0}'.format(strategy))

    merged_document = XLFDocument.load(source, settings)
    if not merged_document.valid:
        logger.warning('Source is not a valid XLIFF 1.2 or 2.0 document.')
        return None

    previous_document = None
    if target is not None:
        previous_document = XLFDocument.load(target, settings)
        if not previous_document.valid:
            logger.warning('Ignoring previous translation, not a valid XLIFF 1.2 or 2.0 document.')
            previous_document = None

    if not target_language and previous_document is not None:
        target_language = previous_document.target_language
    merged_document.target_language = target_language

    units = merged_document.translation_units
    matched = 0
    for unit in units:
        previous_unit = None
        if previous_document is not None:
            previous_unit = find_previous_unit(merged_document, previous_document, unit, strategies)
        if previous_unit is not None:
            matched += 1
        merged_document.merge_unit(unit, previous_unit, settings)

    logger.info('Synchronized %d translation units, %d matched, %d new.',
                len(units), matched, len(units) - matched)

    return merged_document.extract()

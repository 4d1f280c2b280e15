from .version import __version__

def load(source, settings=None):
    '''
    Loads an XLIFF 1.2 or 2.0 document.

    Args:
        source: XLIFF document as str or bytes.
        settings (optional): MergeSettings for the document.
    '''
    from .xlfdocument import XLFDocument
    return XLFDocument.load(source, settings)

def create(version, language, settings=None):
    '''
    Creates an empty XLIFF document.

    Args:
        version: '1.2' or '2.0'.
        language: Target language.
        settings (optional): MergeSettings for the document.
    '''
    from .xlfdocument import XLFDocument
    return XLFDocument.create(version, language, settings)

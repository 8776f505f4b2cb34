"""Language-prefixed URLs for Flask applications."""

from .catalog import LanguageCatalog, verify_language
from .errors import CatalogError
from .extension import I18n, get_language, get_language_name, get_languages
from .factory import create_app
from .middleware import LanguageStage
from .negotiation import parse_accept_language, resolve_language
from .pipeline import Stage, StagePipeline
from .rewrite import Proceed, Redirect, RewriteResult, canonicalize, rewrite_request, strip_language
from .switch import SwitchResult, switch_language

__all__ = [
    'CatalogError',
    'I18n',
    'LanguageCatalog',
    'LanguageStage',
    'Proceed',
    'Redirect',
    'RewriteResult',
    'Stage',
    'StagePipeline',
    'SwitchResult',
    'canonicalize',
    'create_app',
    'get_language',
    'get_language_name',
    'get_languages',
    'parse_accept_language',
    'resolve_language',
    'rewrite_request',
    'strip_language',
    'switch_language',
    'verify_language',
]

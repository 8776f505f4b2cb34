"""Language-prefixed URL canonicalization.

Every public URL carries the language as its first path segment
(``/en/about``). :func:`canonicalize` decides whether a request path already
has the right prefix, and :func:`rewrite_request` turns that decision into
the values the WSGI layer applies: the path the app should route on and the
segment to append to the routing base.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .catalog import LanguageCatalog
from .negotiation import resolve_language


@dataclass(frozen=True)
class Redirect:
    new_uri: str


@dataclass(frozen=True)
class Proceed:
    internal_path: str
    language: str


CanonResult = Union[Redirect, Proceed]


@dataclass(frozen=True)
class RewriteResult:
    language: str
    internal_path: str
    routing_base_prefix: str
    redirect: Optional[str] = None


def strip_language(uri: str, language: str) -> str:
    """Remove the leading language segment: ``'/fr/about'`` -> ``'about'``.

    A uri whose first segment is not ``language`` only loses its leading slashes.
    """
    path = (uri or '').lstrip('/')
    head, sep, rest = path.partition('/')
    if head != language:
        return path
    return rest


def canonicalize(resource_uri: str, language: str, catalog: LanguageCatalog) -> CanonResult:
    """Compute the canonical, language-prefixed form of ``resource_uri``.

    Returns :class:`Proceed` when ``resource_uri`` is already canonical and
    :class:`Redirect` with the target otherwise. ``language`` is verified
    against the catalog first.
    """
    lang = catalog.verify(language)
    resource_uri = resource_uri or ''
    path_parts = resource_uri.lstrip('/').split('/')
    first = path_parts[0]

    if not first:
        canonical = f'/{lang}/'
    elif first not in catalog:
        # no language segment yet
        if resource_uri.startswith('/'):
            canonical = f'/{lang}{resource_uri}'
        else:
            canonical = f'/{lang}/{resource_uri}'
    elif first == lang:
        canonical = resource_uri
    else:
        # another supported language, replace the segment
        canonical = f'/{lang}/' + '/'.join(path_parts[1:])

    if canonical == resource_uri:
        return Proceed(strip_language(resource_uri, lang), lang)
    return Redirect(canonical)


def rewrite_request(
    resource_uri: str,
    session_language: str | None,
    accept_language: str | None,
    catalog: LanguageCatalog,
) -> RewriteResult:
    """Negotiate the language and canonicalize ``resource_uri`` for it."""
    language = resolve_language(session_language, accept_language, catalog)
    result = canonicalize(resource_uri, language, catalog)
    if isinstance(result, Redirect):
        return RewriteResult(
            language=language,
            internal_path=resource_uri,
            routing_base_prefix='',
            redirect=result.new_uri,
        )
    return RewriteResult(
        language=result.language,
        internal_path='/' + result.internal_path,
        routing_base_prefix=f'/{result.language}',
    )


__all__ = [
    'CanonResult',
    'Proceed',
    'Redirect',
    'RewriteResult',
    'canonicalize',
    'rewrite_request',
    'strip_language',
]

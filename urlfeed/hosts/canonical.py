"""URL canonicalization used for feed item identity."""

from collections.abc import Mapping
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

import tldextract

from .rules import HOST_RULES, HostRule, lookup_rule

# Bundled public suffix snapshot only, never fetched over the network
_extract = tldextract.TLDExtract(suffix_list_urls=())


def registrable_domain(host: str) -> str:
    """Strip subdomains from a hostname, keeping the registrable domain.

    ``www.youtube.com`` becomes ``youtube.com`` and ``news.bbc.co.uk`` becomes
    ``bbc.co.uk``. Hosts without a public suffix (IP addresses, ``localhost``)
    are returned as they are, lower-cased and without a port.
    """
    hostname = urlsplit(f"//{host}").hostname or host.lower()
    ext = _extract(hostname)
    if ext.domain and ext.suffix:
        return f"{ext.domain}.{ext.suffix}"
    return hostname


def simple_host(url: str) -> str:
    """Return the URL's network location with a leading ``www.`` removed."""
    netloc = urlsplit(url).netloc
    return netloc.removeprefix("www.")


def _filter_query(query: str, allowed: tuple[str, ...]) -> str:
    """Keep only allow-listed parameters, in allow-list order, first value each."""
    values = parse_qs(query, keep_blank_values=False)
    kept = [(key, values[key][0]) for key in allowed if values.get(key)]
    return urlencode(kept)


def canonicalize_url(url: str, rules: Mapping[str, HostRule] = HOST_RULES) -> str:
    """Return the canonical form of a resolved URL.

    For hosts whose rule carries a parameter allow-list, the host is reduced to
    its registrable domain and the query is rebuilt from the allowed
    parameters only. Every other URL is returned unmodified.

    Args:
        url: Resolved URL, after redirects
        rules: Host rule table keyed by registrable domain

    Returns:
        Canonical URL string
    """
    parts = urlsplit(url)
    if not parts.hostname:
        return url

    domain = registrable_domain(parts.hostname)
    rule = lookup_rule(domain, rules)
    if rule is None or rule.allowed_params is None:
        return url

    netloc = f"{domain}:{parts.port}" if parts.port else domain
    query = _filter_query(parts.query, rule.allowed_params)
    return urlunsplit((parts.scheme, netloc, parts.path, query, parts.fragment))


def title_from_url(url: str, rules: Mapping[str, HostRule] = HOST_RULES) -> str | None:
    """Derive a title from the URL shape for hosts that define a title pattern."""
    hostname = urlsplit(url).hostname
    if not hostname:
        return None

    rule = lookup_rule(registrable_domain(hostname), rules)
    if rule is None or rule.title_pattern is None:
        return None

    match = rule.title_pattern.match(url)
    if match is None or not match.group(1):
        return None
    return match.group(1)

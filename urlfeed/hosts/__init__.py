"""Per-host URL canonicalization and presentation rules."""

from .canonical import canonicalize_url, registrable_domain, simple_host, title_from_url
from .rules import HOST_RULES, HostRule, lookup_rule

__all__ = [
    "HOST_RULES",
    "HostRule",
    "canonicalize_url",
    "lookup_rule",
    "registrable_domain",
    "simple_host",
    "title_from_url",
]

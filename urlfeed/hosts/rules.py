"""Static table of host rules keyed by registrable domain."""

import re
from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict


class HostRule(BaseModel):
    """Canonicalization and decoration settings for one registrable domain.

    ``allowed_params`` of ``None`` leaves the query string alone, while an
    empty tuple drops every query parameter.
    """

    model_config = ConfigDict(frozen=True)

    allowed_params: tuple[str, ...] | None = None
    prefix: str | None = None
    title_pattern: re.Pattern[str] | None = None


HOST_RULES: Mapping[str, HostRule] = MappingProxyType(
    {
        "youtube.com": HostRule(allowed_params=("v", "list"), prefix="📺"),
        "substack.com": HostRule(prefix="🟧"),
        "x.com": HostRule(
            allowed_params=(),
            prefix="𝕏",
            # x.com pages render client side, so the account name is the title
            title_pattern=re.compile(r"^https://x\.com/([^/?#]+)(?:/status/)?[^/]*$"),
        ),
    }
)


def lookup_rule(domain: str, rules: Mapping[str, HostRule] = HOST_RULES) -> HostRule | None:
    """Return the rule for a registrable domain, or None when it has no special handling."""
    return rules.get(domain.lower())

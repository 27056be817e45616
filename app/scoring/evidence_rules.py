# app/scoring/evidence_rules.py
"""
Evidence Rules
--------------
Two independent checks that the validation layer combines:

    is_evidence_required(indicator_id, raw_value)
        Per-indicator policy: high claims must be substantiated.

    validate_evidence(bundle)
        Structural check: at least one of text / link / file is usable.
            text  → non-blank description
            link  → absolute URL (scheme + host)
            file  → non-blank file name

Neither function raises; malformed input is simply "not valid".
"""

from typing import Any, Mapping, Optional
from urllib.parse import urlparse

from app.models.evidence import EvidenceBundle
from app.scoring.indicator_catalog import IndicatorCatalog, get_indicator_catalog
from app.scoring.values import coerce_value, to_number


def is_evidence_required(
    indicator_id: str,
    raw_value: Any,
    catalog: Optional[IndicatorCatalog] = None,
) -> bool:
    """True when the indicator's policy demands evidence for this response."""
    value = coerce_value(raw_value)
    if value is None:
        return False
    metadata = (catalog or get_indicator_catalog()).get(indicator_id)
    if metadata is None:
        return False
    return metadata.evidence_policy.requires(to_number(value))


def _non_blank(text: Any) -> bool:
    return isinstance(text, str) and text.strip() != ""


def is_absolute_url(url: Any) -> bool:
    if not _non_blank(url):
        return False
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


def _field(item: Any, *names: str) -> Any:
    """Read the first present attribute / key among names."""
    if item is None:
        return None
    for name in names:
        if isinstance(item, Mapping):
            if item.get(name) is not None:
                return item.get(name)
        elif getattr(item, name, None) is not None:
            return getattr(item, name)
    return None


def validate_evidence(bundle: Any) -> bool:
    """
    Check that an evidence bundle carries at least one usable item.

    Accepts an EvidenceBundle or a plain mapping with optional "text",
    "link" and "file" entries (camelCase or snake_case file name).

    Examples:
        >>> validate_evidence({"text": {"description": "x"}, "link": None, "file": None})
        True
        >>> validate_evidence({"link": {"url": "not-a-url"}, "text": None, "file": None})
        False
    """
    if bundle is None:
        return False
    if not isinstance(bundle, (EvidenceBundle, Mapping)):
        return False

    text = _field(bundle, "text")
    if _non_blank(_field(text, "description")):
        return True

    link = _field(bundle, "link")
    if is_absolute_url(_field(link, "url")):
        return True

    file = _field(bundle, "file")
    if _non_blank(_field(file, "file_name", "fileName")):
        return True

    return False


def has_evidence(entry: Any) -> bool:
    """Evidence presence for one indicator entry ({value, evidence})."""
    if not isinstance(entry, Mapping):
        return False
    return validate_evidence(entry.get("evidence"))

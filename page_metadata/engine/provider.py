"""
Provider name derivation.
Builds a readable publisher label from a hostname when the page declares none.
"""
import re
from typing import Optional

WWW_LABEL = re.compile(r"^www\d*$", re.IGNORECASE)

# Labels that sit under a country code TLD, as in example.co.uk
SECOND_LEVEL_LABELS = frozenset({"co", "com", "org", "net", "gov", "edu", "ac"})


def get_provider(hostname: Optional[str]) -> str:
    """
    Derive a provider label from a hostname.

    Examples:
        www.example.com        -> "example"
        things.example.co.uk   -> "things example"
        localhost              -> "localhost"
        co.uk                  -> ""

    An empty result means no provider could be derived.
    """
    if not hostname:
        return ""
    if "." not in hostname:
        return hostname

    labels = hostname.split(".")
    if WWW_LABEL.match(labels[0]):
        labels = labels[1:]

    # A second-level label makes the last two labels the TLD. With only two
    # labels left (co.uk) the whole hostname is TLD and nothing remains.
    if len(labels) >= 2 and labels[-2].lower() in SECOND_LEVEL_LABELS:
        labels = labels[:-2]
    else:
        labels = labels[:-1]

    return " ".join(label for label in labels if label)

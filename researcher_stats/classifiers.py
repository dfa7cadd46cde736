"""Keyword-based classification of free-text profile fields.

Both classifiers are ordered rule lists evaluated top to bottom, first match
wins. Reordering the tables changes results.
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence, Tuple

Predicate = Callable[[str], bool]
Rule = Tuple[Predicate, str]

ACADEMIA = "academia"
INDUSTRY = "industry"
OTHER = "other"

ACADEMIA_KEYWORDS: Tuple[str, ...] = (
    "university", "univ", "college", "institute", "school", "faculty",
    "professor", "lecturer", "academic", "research center", "lab",
    "department", "dept", "academy", "polytechnic", "eth", "mit",
    "stanford", "berkeley", "harvard", "oxford", "cambridge", "caltech",
    "carnegie mellon", "georgia tech", "tu munich", "epfl", "inria",
    "max planck", "dfki", "rwth",
)

INDUSTRY_KEYWORDS: Tuple[str, ...] = (
    "google", "meta", "facebook", "microsoft", "apple", "amazon", "aws",
    "nvidia", "intel", "ibm", "oracle", "salesforce", "adobe", "openai",
    "deepmind", "anthropic", "netflix", "uber", "lyft", "airbnb", "twitter",
    "linkedin", "snap", "bytedance", "tiktok", "alibaba", "tencent", "baidu",
    "samsung", "huawei", "qualcomm", "cisco", "vmware", "sap", "siemens",
    "bosch", "valeo", "inc.", "corp", "ltd", "llc", "gmbh", "co.",
)


def _all_of(*terms: str) -> Predicate:
    return lambda text: all(t in text for t in terms)


def _any_of(*terms: str) -> Predicate:
    return lambda text: any(t in text for t in terms)


# Ranked professor titles must precede the bare "professor" rule.
POSITION_RULES: Tuple[Rule, ...] = (
    (_all_of("full", "professor"), "Full Professor"),
    (_all_of("associate", "professor"), "Associate Professor"),
    (_all_of("assistant", "professor"), "Assistant Professor"),
    (_any_of("professor"), "Professor"),
    (_any_of("lecturer", "teaching"), "Lecturer"),
    (_any_of("postdoc", "post-doc"), "Postdoctoral"),
    (_any_of("phd", "doctoral", "graduate"), "PhD Student"),
    (_any_of("research scientist", "researcher"), "Research Scientist"),
    (_any_of("engineer", "developer"), "Engineer"),
    (_any_of("director", "head", "lead"), "Director/Lead"),
    (_any_of("manager"), "Manager"),
    (_any_of("fellow"), "Fellow"),
    (_any_of("scientist"), "Scientist"),
)
POSITION_FALLBACK = "Other"


def first_match(text: str, rules: Iterable[Rule], default: str) -> str:
    for predicate, label in rules:
        if predicate(text):
            return label
    return default


def normalize_position(position: str, rules: Sequence[Rule] = POSITION_RULES) -> str:
    return first_match(position.lower(), rules, POSITION_FALLBACK)


def sector_text(affiliation: str, position: str) -> str:
    return f"{(affiliation or '').lower()} {(position or '').lower()}"


def sector_rules(
    academia_keywords: Sequence[str] = ACADEMIA_KEYWORDS,
    industry_keywords: Sequence[str] = INDUSTRY_KEYWORDS,
) -> Tuple[Rule, ...]:
    return (
        (_any_of(*academia_keywords), ACADEMIA),
        (_any_of(*industry_keywords), INDUSTRY),
    )


SECTOR_RULES: Tuple[Rule, ...] = sector_rules()


def classify_sector(affiliation: str, position: str, rules: Sequence[Rule] = SECTOR_RULES) -> str:
    """Return ``academia``, ``industry`` or ``other``.

    Academia is tested first and wins even when an industry keyword also
    matches, e.g. a professor listing a company affiliation.
    """
    return first_match(sector_text(affiliation, position), rules, OTHER)

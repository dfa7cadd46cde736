# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds the project root to sys.path so `import researcher_stats` works without installing.
"""

import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from researcher_stats.records import Location, ResearcherRecord  # noqa: E402
from researcher_stats.taxonomy import taxonomy_from_dict  # noqa: E402


def make_record(name="R", **kwargs):
    country = kwargs.pop("country", None)
    if country is not None:
        kwargs["location"] = Location(country=country)
    return ResearcherRecord(name=name, **kwargs)


@pytest.fixture
def records():
    return [
        make_record(
            "Ada",
            affiliation="Stanford University",
            position="Associate Professor of Computer Science",
            hindex=42,
            citedby=12000,
            country="United States",
            standardized_interests=("Machine Learning", "Natural Language Processing"),
        ),
        make_record(
            "Ben",
            affiliation="Google Research",
            position="Senior Research Engineer",
            hindex=15,
            citedby=3000,
            country="United States",
            standardized_interests=("Computer Vision",),
        ),
        make_record(
            "Chen",
            affiliation="Freelance",
            position="",
            hindex=None,
            citedby=None,
            standardized_interests=("Unmapped Topic",),
        ),
        make_record(
            "Dana",
            affiliation="KAUST",
            position="PhD Candidate",
            hindex=3,
            citedby=40,
            country="Saudi Arabia",
            standardized_interests=("Machine Learning", "Deep Learning", "Image Segmentation"),
        ),
    ]


@pytest.fixture
def taxonomy():
    return taxonomy_from_dict(
        {
            "categories": {
                "Artificial Intelligence": ["Machine Learning", "Deep Learning"],
                "Natural Language Processing": ["Natural Language Processing", "Machine Translation"],
                "Computer Vision": ["Computer Vision", "Image Segmentation"],
            }
        }
    )

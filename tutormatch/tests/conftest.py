"""
Shared fixtures: tutor snapshot factory and a small tutor pool.
"""

import pytest

from tutormatch.schemas.tutor import Tutor


def build_tutor(tutor_id="t1", **overrides):
    """Tutor snapshot with neutral defaults, overridden per test."""
    fields = {
        "id": tutor_id,
        "name": f"Tutor {tutor_id}",
        "price_per_hour": 30.0,
        "rating_avg": 4.0,
        "rating_count": 10,
        "languages": ["en"],
        "verified": False,
        "subjects": [{"name": "Mathematics", "level": "High School"}],
        "availability": [],
    }
    fields.update(overrides)
    return Tutor.model_validate(fields)


@pytest.fixture
def make_tutor():
    return build_tutor


@pytest.fixture
def tutor_pool():
    """Three tutors with clearly different fits for a Physics/English search."""
    return [
        build_tutor(
            "physics-pro",
            price_per_hour=40.0,
            rating_avg=4.9,
            languages=["en", "fr"],
            verified=True,
            subjects=[{"name": "Physics"}],
            availability=[{"weekday": 0, "start_minutes": 540, "end_minutes": 600}],
        ),
        build_tutor(
            "math-only",
            price_per_hour=90.0,
            rating_avg=3.0,
            languages=["ar"],
            subjects=[{"name": "Mathematics"}],
            availability=[{"weekday": 5, "start_minutes": 600, "end_minutes": 660}],
        ),
        build_tutor(
            "applied-physics",
            price_per_hour=20.0,
            rating_avg=4.2,
            languages=["en"],
            subjects=[{"name": "Applied Physics"}],
            availability=[{"weekday": 2, "start_minutes": 1020, "end_minutes": 1080}],
        ),
    ]

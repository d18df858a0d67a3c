from __future__ import annotations

import os

from hypothesis import HealthCheck, settings


settings.register_profile(
    "ci",
    max_examples=1000,
    derandomize=True,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile("dev", max_examples=25)

# Select with e.g. `SPANPY_HYPOTHESIS_PROFILE=ci pytest`
settings.load_profile(os.environ.get("SPANPY_HYPOTHESIS_PROFILE", "default"))

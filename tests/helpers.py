"""Shared test data."""

# A normal name and an intentionally funky one with surrounding spaces.
SEED_VARS = {
    "PATH": "/usr/bin:/bin:/usr/sbin:/sbin",
    " LANG ": "en_CA.UTF-8",
}

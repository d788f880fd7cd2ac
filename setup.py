from __future__ import annotations

import os

from setuptools import setup


def read_version() -> str:
    """Read the version, preferring the PKG_VERSION environment variable."""
    env_version = os.getenv("PKG_VERSION", "").strip()
    if env_version:
        return env_version.lstrip("v")
    return "1.0.0"


setup(
    name="bitvector32",
    version=read_version(),
    description="Fixed-length bit vector packed into 32-bit words.",
    long_description="Fixed-length bit vector packed into 32-bit words, with bitwise algebra, "
                     "left shift, population count and a radix text encoding.",
    long_description_content_type="text/plain",
    packages=["bitvector32"],
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    test_suite="tests",
)

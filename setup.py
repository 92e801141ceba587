#!/usr/bin/env python3
"""Simple setup script for development."""

from setuptools import setup, find_packages

setup(
    name="payara-admin-client",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "httpx>=0.26.0",
        "pyyaml>=6.0.1",
        "prometheus-client>=0.19.0",
        "structlog>=24.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "payara-deploy=payara_admin.__main__:main",
        ],
    },
)

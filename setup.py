"""Package setup for nexus_api."""

from setuptools import setup, find_packages

setup(
    name="nexus-api",
    version="1.0.0",
    description="Authenticated client for the Nexus Repository Manager REST API",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "colorlog>=6.8.0",
        "tqdm>=4.66.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "nexus-api=nexus_api.cli:main",
        ],
    },
)

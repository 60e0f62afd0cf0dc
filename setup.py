"""Setup script for ytquery."""

from setuptools import setup, find_namespace_packages

setup(
    name="ytquery",
    version="0.1.0",
    description="Query videos, playlists and channels from the YouTube Data API",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src"),
    install_requires=[
        "google-api-python-client>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "ytquery=ytquery.cli:main",
        ]
    },
)

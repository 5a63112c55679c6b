"""Setup script for Site Audit."""

from setuptools import setup, find_packages

setup(
    name="siteaudit",
    version="1.0.0",
    description="Website audit: same-host crawl scored across nine SEO, accessibility and content dimensions",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9.0",
        "beautifulsoup4>=4.12.0",
        "click>=8.1.0",
        "rich>=13.6.0",
        "loguru>=0.7.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.1.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "siteaudit=siteaudit.cli:main",
        ],
    },
    python_requires=">=3.10",
)

from setuptools import setup, find_packages

setup(
    name="sitemapper",
    version="0.1.0",
    description="Same-domain breadth-first crawler that emits sitemap XML",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "aiohttp>=3.9.0",
        "beautifulsoup4>=4.12.0",
        "fastapi>=0.110.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "sitemapper=sitemapper.cli:main",
        ],
    },
)

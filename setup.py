"""Package setup for outlink_extractor."""

from setuptools import setup, find_packages

setup(
    name="outlink-extractor",
    version="1.0.0",
    description="Link-extraction stage of a web crawler: pages in, crawlable outlinks out",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "urllib3>=2.0.0",
        "chardet>=5.0.0",
        "tqdm>=4.66.0",
        "colorlog>=6.8.0",
    ],
    entry_points={
        "console_scripts": [
            "outlink-extractor=outlink_extractor.cli:main",
        ],
    },
)

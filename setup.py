import os

from setuptools import setup

VERSION = "0.1"


def get_long_description():
    with open(
        os.path.join(os.path.dirname(os.path.abspath(__file__)), "README.md"),
        encoding="utf8",
    ) as fp:
        return fp.read()


setup(
    name="notionkit",
    description="Typed client for the Notion API",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    license="Apache License, Version 2.0",
    version=VERSION,
    packages=[
        "notionkit",
    ],
    entry_points="""
        [console_scripts]
        notionkit=notionkit.cli:cli
    """,
    install_requires=[
        "click",
        "pydantic>=2.5",
        "pydantic-core",
        "requests",
        "types-requests",
    ],
    extras_require={
        "test": [
            "coverage",
            "pytest",
            "pytest-xdist",
            "requests-mock",
            "black",
            "isort",
            "flake8",
            "mypy",
        ],
    },
    python_requires=">=3.10",
)

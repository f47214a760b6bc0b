import os
import re
from typing import List

from setuptools import find_packages, setup

_HERE = os.path.dirname(os.path.abspath(__file__))


def _get_version() -> str:
    # Read without importing the package, which needs the runtime dependencies.
    with open(os.path.join(_HERE, "ts_generic_lint", "version.py")) as f:
        return re.search(r'^VERSION = "([^"]+)"', f.read(), re.MULTILINE).group(1)


def _get_long_description() -> str:
    readme = os.path.join(_HERE, "README.md")
    if not os.path.exists(readme):
        return ""
    with open(readme, encoding="utf-8") as f:
        return f.read()


CORE_REQUIREMENTS: List[str] = [
    "click>=7.0,<9",
    "tomli>=2.0",
    "tree-sitter>=0.23",
    "tree-sitter-typescript>=0.23",
]

TEST_REQUIREMENTS: List[str] = [
    "pytest>=7.0",
]

setup(
    name="ts-generic-lint",
    version=_get_version(),
    description=(
        "Lint rule that requires an explicit type argument on TypeScript generic types "
        "such as Uint8Array<ArrayBuffer>, with autofix"
    ),
    long_description=_get_long_description(),
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    python_requires=">=3.10",
    packages=find_packages(include=["ts_generic_lint", "ts_generic_lint.*"]),
    install_requires=CORE_REQUIREMENTS,
    extras_require={"test": TEST_REQUIREMENTS},
    entry_points={
        "console_scripts": [
            "ts-generic-lint=ts_generic_lint.cli:cli",
        ],
    },
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Quality Assurance",
    ],
    zip_safe=False,
)

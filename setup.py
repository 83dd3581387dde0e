from pathlib import Path
import re

from setuptools import find_packages, setup


def _read_version() -> str:
    init = Path(__file__).parent / "src" / "decomment" / "__init__.py"
    match = re.search(r"^__version__ = '([^']+)'", init.read_text(encoding="utf-8"), re.M)
    if not match:
        raise RuntimeError("unable to find __version__ in src/decomment/__init__.py")
    return match.group(1)


setup(
    name="decomment",
    version=_read_version(),
    description="Strip comments from C-family, Python, Haskell and markup sources in place",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "decomment=decomment.cli:main",
        ],
    },
)

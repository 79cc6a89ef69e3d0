from pathlib import Path
from setuptools import setup, find_packages

BASE_DIR = Path(__file__).parent

# ----------------------------------------------------------------------
# Core version & requirements (the library itself)
# ----------------------------------------------------------------------
version = (BASE_DIR / ".version").read_text().strip()
long_description = (BASE_DIR / "README.md").read_text(encoding="utf-8")
requirements_lib = (BASE_DIR / "requirements_lib.txt").read_text().splitlines()

# ----------------------------------------------------------------------
# Extras handling
# ----------------------------------------------------------------------
extras = {
    "test": ["pytest"],
}

# ----------------------------------------------------------------------
setup(
    name="llm-translator",
    version=version,
    description="LLM Translator – chat-completion translation endpoint adapter",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="RadLab.dev Team",
    license="Apache-2.0",
    packages=find_packages(
        where=".",
        include=[
            "llm_translator_lib*",
            "llm_translator_cli*",
        ],
        exclude=("tests", "docs"),
    ),
    python_requires=">=3.10",
    install_requires=[
        _r.strip()
        for _r in requirements_lib
        if _r.strip() and not _r.strip().startswith("#")
    ],
    extras_require=extras,
    entry_points={
        "console_scripts": [
            "llm-translate=llm_translator_cli.translate:main",
        ]
    },
)

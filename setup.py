from setuptools import find_packages, setup

setup(
    name="linkinfo",
    version="0.1.0",
    description="Canonical path and link model for markdown and wiki references",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer<0.26",  # CLI (0.26+ vendors click; code uses click contexts directly)
        "click",  # CLI context and usage errors (imported directly)
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "linkinfo=linkinfo.cli:main",
        ],
    },
)

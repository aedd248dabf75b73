from setuptools import find_packages, setup

setup(
    name="git-diffs",
    version="0.1.0",
    description="git-diffs - browse the changes between two git revisions",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI framework
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "rapidfuzz",  # Fuzzy matching for file and line search
        "pyyaml",  # YAML output
        "pygments",  # Syntax highlighting of JSON/YAML output
        "pytest>=7.0",  # Testing framework
        "pytest-timeout>=2.1",  # Test timeouts
        "pytest-xdist>=3.0",  # Parallel test execution
        "ruff",  # Linting and formatting
        "mypy",  # Static type checking
        "types-PyYAML",  # Type stubs
        "types-setuptools",  # Type stubs
    ],
    entry_points={
        "console_scripts": [
            "gdiffs=gdiffs.cli:main",
        ],
    },
)

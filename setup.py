from setuptools import find_packages, setup

setup(
    name="urikit",
    version="0.1.0",
    description="RFC 3986 URI value type with POSIX-style path operations",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output models
        "typer>=0.16",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
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
            "urikit=urikit.cli:main",
        ],
    },
)

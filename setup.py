from setuptools import find_packages, setup

setup(
    name="meld",
    version="0.1.0",
    description="Validation of agent, IDE and MCP server configuration documents",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI; 0.26+ vendors click, breaking click.get_current_context()
        "click",  # Typer context lookup
        "rich",  # Terminal formatting
        "pydantic>=2",  # Command output schemas
        "pyyaml",  # YAML config documents and YAML output
        "pygments",  # Highlighted JSON/YAML output on a terminal
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "meld=meld.cli:main",
        ],
    },
)

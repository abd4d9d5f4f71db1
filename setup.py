from setuptools import setup, find_packages

setup(
    name="chainsync",
    version="0.1.0",
    packages=find_packages(include=["chainsync", "chainsync.*"]),
    include_package_data=True,
    install_requires=[
        "structlog>=23.1.0",
        "pydantic>=2.0.0",
        "typer>=0.9.0",
        "rich>=13.0.0",
        "pyyaml>=6.0.1",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "click>=8.2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "chainsync=chainsync.cli:app",
        ],
    },
    python_requires=">=3.11",
)

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="logaflow-mcp",
    version="1.0.0",
    author="Logaflow Team",
    description="MCP server exposing the Logaflow feedback API to AI agents",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "mcp>=1.9.0,<2",
        "httpx>=0.27.0",
        "pydantic>=2.5.0",
        "click>=8.1.7",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0,<9",
        ],
    },
    entry_points={
        "console_scripts": [
            "logaflow-mcp=logaflow_mcp.cli:main",
        ],
    },
)

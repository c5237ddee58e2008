"""
ymlreader - Typed reader for flat YAML-like configuration files
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="ymlreader",
    version="0.1.0",
    author="ymlreader Contributors",
    description="Typed, thread-safe reader for flat key/value YAML-like configuration files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.13",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.11",
    install_requires=[
        # Core - Validation
        "pydantic>=2.12.0",

        # Core - Logging
        "loguru",

        # Core - Configuration
        "python-dotenv>=1.2.0",
    ],
    extras_require={
        # Development
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pyyaml",
        ],
    },
)

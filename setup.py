"""
Setup script for the terminal view router.
"""

from setuptools import setup, find_packages

setup(
    name="term-construct",
    version="0.1.0",
    description="Minimal view based routing for terminal applications",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="term-construct developers",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "rich>=13.4.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "hypothesis>=6.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)

import os

from setuptools import find_packages, setup

setup(
    name="runval",
    version="1.0.3",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
        "typing_extensions>=4.7",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    author="runval Contributors",
    description="Composable runtime schema validation with path-annotated errors",
    long_description=open("README.md").read()
    if os.path.exists("README.md")
    else "",
    long_description_content_type="text/markdown",
)

"""
Setup script for brightsteps-core.

BrightSteps core is the pure, I/O-free heart of the BrightSteps learning
app. It provides:

1. Content packs - schema and referential-integrity validation for
   fact card, picture phrase and vocab voice packs
2. Adaptive review - interval-ladder scheduling with support levels
3. Session composition - due-weighted selection of practice items
"""

from setuptools import find_packages, setup

setup(
    name="brightsteps-core",
    version="1.0.0",
    description="Content pack validation and adaptive review scheduling for BrightSteps",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="BrightSteps",
    packages=find_packages(include=["brightsteps", "brightsteps.*"]),
    python_requires=">=3.11",
    install_requires=[
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="learning spaced-repetition content-validation education",
)

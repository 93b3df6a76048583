"""
Setup script for the jasperclient package.
jasperclient: JasperReports Server REST client with async task management
"""

from pathlib import Path

from setuptools import find_packages, setup

here = Path(__file__).parent
readme = here / "README.md"

setup(
    name="jasperclient",
    version="1.9.0",
    description="JasperReports Server REST client with async task management",
    long_description=readme.read_text(encoding="utf-8") if readme.exists() else "",
    long_description_content_type="text/markdown",
    license="LGPL-3.0-or-later",
    packages=find_packages(include=["jasperclient", "jasperclient.*"]),
    python_requires=">=3.8",
    install_requires=[
        "httpx>=0.24",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "jasperclient=jasperclient.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)",
        "Operating System :: OS Independent",
    ],
)

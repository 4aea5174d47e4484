""" ecdsalib build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import ecdsalib

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=ecdsalib.name,
    version=ecdsalib.__version__,
    url="https://github.com/ecdsalib/ecdsalib",
    project_urls={
        "GitHub": "https://github.com/ecdsalib/ecdsalib",
        "Issues": "https://github.com/ecdsalib/ecdsalib/issues",
    },
    license=ecdsalib.__license__,
    author=ecdsalib.__author__,
    author_email=ecdsalib.__author_email__,
    description="ECDSA over configurable short Weierstrass curves",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["ecdsalib = ecdsalib.cli:main"]},
    keywords="cryptography elliptic-curves ecdsa secp256k1 digital-signature",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)

""" stealthkit build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import stealthkit

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=stealthkit.name,
    version=stealthkit.__version__,
    license=stealthkit.__license__,
    author=stealthkit.__author__,
    author_email=stealthkit.__author_email__,
    description="Stealth addresses and stealth Safe address prediction",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={"stealthkit": ["_data/*.json"]},
    install_requires=["pycryptodome", "requests"],
    extras_require={"test": ["pytest"]},
    keywords=(
        "ethereum cryptography elliptic-curves ecdsa RFC-6979 bip32 "
        "stealth-address ECDH EIP-191 EIP-55 CREATE2 safe multisig"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)

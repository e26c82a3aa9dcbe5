"""
A setuptools based setup module.

See:
https://packaging.python.org/guides/distributing-packages-using-setuptools/
"""

import setuptools

PACKAGE_DATA = {
    "evgcore.particle": ["isotopes.yml", "validation.json"],
    "evgcore.io": ["validation.json"],
}

INSTALL_REQUIRES = [
    "attrs",
    "jsonschema",
    "numpy",
    "particle",
    "PyYAML",
    "tqdm",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest",
    ],
}


def long_description():
    """Parse long description from readme."""
    with open("README.md", "r") as readme_file:
        return readme_file.read()


setuptools.setup(
    name="evgcore",
    version="0.1.0",
    author="The evgcore team",
    long_description=long_description(),
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    license="GPLv3 or later",
    python_requires=">=3.7",
    tests_require=["pytest"],
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
    package_data=PACKAGE_DATA,
    include_package_data=True,
)

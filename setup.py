from setuptools import find_packages, setup

VERSION = "0.1.0"

INSTALL_REQUIRES = [
    "pydantic>=2.0",
    "pydantic-settings>=2.0",
]

EXTRAS_REQUIRE = {
    "test": ["pytest>=7.0"],
}


setup(
    name="resolve-path",
    version=VERSION,
    description="Resolve relative and tilde paths to absolute paths without canonicalizing them.",
    python_requires=">=3.9",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=INSTALL_REQUIRES,
    extras_require=EXTRAS_REQUIRE,
)

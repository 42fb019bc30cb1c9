from setuptools import find_namespace_packages, setup

# Namespace layout: the physical structure matches the import path
packages = find_namespace_packages(where="../..", include=["accelconv.core", "accelconv.core.*"])

setup(
    packages=packages,
    package_dir={"": "../.."},
)

from setuptools import setup, find_packages

library_name = 'gravfield'

setup(
    name=library_name,
    version="0.1.0",
    packages=find_packages(exclude=["*.unit_test", "*.unit_test.*"]),
    python_requires=">=3.11",
    install_requires=["torch", "typing_extensions"],
    extras_require={"test": ["pytest"]},
    description="point mass and spherical harmonics gravity field models",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)

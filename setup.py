from pathlib import Path

import setuptools

this_directory = Path(__file__).parent
long_description = (this_directory / "README.rst").read_text()

test_dependencies = ["pytest"]


setuptools.setup(
    name="spiralpack",
    version="1.0.0",
    description="Deterministic circular cloud layout of rectangles along an Archimedean spiral.",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    packages=["spiralpack"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    keywords="rectangle packing layout tag cloud spiral",
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.18",
    ],
    test_suite="pytest",
    tests_require=test_dependencies,
    extras_require={"test": test_dependencies},
)

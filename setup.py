import os

from setuptools import setup, find_packages

version_file = os.path.join(os.path.dirname(__file__), "affine_digitizer", "version.py")
with open(version_file, "r") as f:
    exec(f.read())

readme_file = os.path.join(os.path.dirname(__file__), "README.md")
with open(readme_file, "r") as f:
    long_description = f.read()

setup(
    name="affine_digitizer",
    version=__version__,  # noqa: F821 -- loaded by 'exec' above
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    description=(
        "Optimal affine digitization of floating point samples into "
        "fixed-width integer codes."
    ),
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="GPL-3.0-only",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Image Processing",
    ],
    keywords="quantization digitization affine fixed-point integer",
    python_requires=">=3.7",
    install_requires=[
        "sentinels",
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)

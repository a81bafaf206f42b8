from pathlib import Path
from setuptools import setup, find_packages


BASE_DIR = Path(__file__).parent
with open(BASE_DIR / "dicomtree" / "_version.py") as f:
    exec(f.read())

with open(BASE_DIR / 'README.md') as f:
    long_description = f.read()


setup(
    name="dicomtree",
    version=__version__,  # noqa: F821
    author="dicomtree contributors",
    description=(
        "A pure Python package for decoding DICOM files and network "
        "buffers into an element tree"
    ),
    long_description=long_description,
    long_description_content_type='text/markdown',
    license="MIT",
    keywords="dicom python medical imaging",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Intended Audience :: Developers",
        "Intended Audience :: Healthcare Industry",
        "Intended Audience :: Science/Research",
        "Development Status :: 4 - Beta",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Medical Science Apps.",
        "Topic :: Software Development :: Libraries"
    ],
    packages=find_packages(include=["dicomtree", "dicomtree.*"]),
    package_data={
        'dicomtree': ['py.typed'],
    },
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.7',
    install_requires=[],
    extras_require={
        "tests": [
            "pytest",
        ],
    },
)

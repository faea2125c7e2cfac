from pathlib import Path

from setuptools import find_packages, setup

ROOT = Path(__file__).parent
README = (ROOT / "README.md").read_text(encoding="utf-8") if (ROOT / "README.md").exists() else ""

setup(
    name="pixbridge",
    version="0.1.0",
    description="Convert packed 32-bit RGB/ARGB bitmaps to and from generic numpy pixel images",
    long_description=README,
    long_description_content_type="text/markdown",
    author="pixbridge Contributors",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.19",
        "Pillow>=8.0.0",
    ],
    extras_require={
        "yaml": [
            "PyYAML>=5.4",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "PyYAML>=5.4",
        ],
        "all": [
            "pixbridge[yaml,dev]",
        ],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Graphics :: Graphics Conversion",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords=[
        "image",
        "pixel-format",
        "bitmap",
        "argb32",
        "color-conversion",
        "numpy",
    ],
    entry_points={
        "console_scripts": [
            "pixbridge=pixbridge.cli:main",
        ],
    },
)

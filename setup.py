"""
Setup script for the adaptivemap package.

Install with: pip install .
Install for development: pip install -e .[test]
Create wheel: python setup.py bdist_wheel
"""

from setuptools import setup, find_packages

# Read long description from README if it exists
long_description = """
PyAdaptiveMap - Hash Map with Adaptive Collision Resolution
===========================================================

A pure Python hash map whose buckets start as linked collision chains and are
promoted to AVL trees once a bucket holds more than a configurable number of
entries, bounding the worst case at O(log n) regardless of hash clustering.

Features:
- O(1) average, O(log n) worst case put / get
- One-way chain to tree promotion per bucket
- Set adapter and a small social graph registry on top
- Fixed bucket count, no deletion

Example:
    from adaptivemap import AdaptiveHashMap

    m = AdaptiveHashMap(capacity=30, threshold=8)
    m.put('alice', 1)
    m.get('alice')  # 1
"""

setup(
    name="pyadaptivemap",
    version="1.0.0",
    description="Hash map and set with chain to AVL tree bucket promotion",
    long_description=long_description,
    long_description_content_type="text/plain",
    packages=find_packages(exclude=["tests", "tests.*", "scripts"]),
    python_requires=">=3.7",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    zip_safe=False,
)

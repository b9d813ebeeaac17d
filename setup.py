from setuptools import setup, find_packages

setup(
    name="pagecss",
    version="1.0.0",
    packages=find_packages(),
    install_requires=[
        'cssutils',
        'orjson',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'pytest-timeout',
            'pytest-xdist',
        ],
    },
    entry_points={
        'console_scripts': [
            'pagecss=pagecss.cli:main',
        ],
    },
    python_requires='>=3.8',
    description="Per-page and per-namespace CSS blocks for wiki pages",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",
        "Operating System :: OS Independent",
    ],
)

from setuptools import setup, find_packages

# All dependencies - matches the imports of the diffhue package
install_requires = [
    # Core requirements
    "colorama>=0.4.6",
    "Pygments>=2.16.1",
    "rich>=13.5.2",
]

# Development dependencies
extras_require = {
    'dev': [
        'pytest>=7.4.0',
        'pytest-cov>=4.1.0',
        'black>=23.7.0',
        'isort>=5.12.0',
        'mypy>=1.4.1',
        'flake8>=6.1.0',
    ]
}

setup(
    name="diffhue",
    version="0.1.0",
    license='GNU GPLv3',
    description="Syntax-highlighting filter for git diff output",
    packages=find_packages(include=["diffhue", "diffhue.*"]),
    python_requires='>=3.9',
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "diffhue=diffhue.main:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3.9",
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)

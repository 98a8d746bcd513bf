from setuptools import setup, find_packages
import re

# Read version from taxcalc/__init__.py
with open('taxcalc/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='tax-calc',
    version=version,
    packages=find_packages(include=['taxcalc', 'taxcalc.*']),
    package_data={
        'taxcalc': ['tax_rules/*.yaml'],
    },
    install_requires=[
        'PyYAML>=6.0',
        'pydantic>=2.0.0',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
        ],
    },
    author='Personal',
    description='Federal and state income tax, preferential rate, surtax and credit calculations.',
    python_requires='>=3.10',
)

from setuptools import setup, find_packages
import re

# Read version from vntax/__init__.py
with open('vntax/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='vntax',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'vntax': ['rules/*.yaml', 'rules/tax/*.yaml'],
    },
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'vntax=vntax.cli.__main__:main',
            'vntax-mcp=vntax.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='Vietnamese tax calculators and mobile phone number validation.',
    python_requires='>=3.10',
)
